import pytest

from common.config.env import get_env_bool, get_env_int, get_env_str, load_env_file


def test_get_env_str_default(monkeypatch):
    """Unset variables fall back to the default."""
    monkeypatch.delenv("UYHO_TEST_STR", raising=False)

    assert get_env_str("UYHO_TEST_STR", "fallback") == "fallback"


def test_get_env_str_required(monkeypatch):
    """Required variables raise when missing."""
    monkeypatch.delenv("UYHO_TEST_STR", raising=False)

    with pytest.raises(KeyError, match="UYHO_TEST_STR"):
        get_env_str("UYHO_TEST_STR", required=True)


def test_get_env_int(monkeypatch):
    """Integer variables are parsed and invalid values rejected."""
    monkeypatch.setenv("UYHO_TEST_INT", "42")
    assert get_env_int("UYHO_TEST_INT", 1) == 42

    monkeypatch.setenv("UYHO_TEST_INT", "forty-two")
    with pytest.raises(ValueError, match="must be an integer"):
        get_env_int("UYHO_TEST_INT", 1)


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), ("1", True), ("YES", True), ("on", True), ("false", False), ("0", False), ("", False)],
)
def test_get_env_bool_values(monkeypatch, raw, expected):
    """Boolean variables accept the usual spellings."""
    monkeypatch.setenv("UYHO_TEST_BOOL", raw)

    assert get_env_bool("UYHO_TEST_BOOL", None) is expected


def test_get_env_bool_invalid(monkeypatch):
    """Unrecognized boolean spellings are rejected."""
    monkeypatch.setenv("UYHO_TEST_BOOL", "maybe")

    with pytest.raises(ValueError, match="must be a boolean"):
        get_env_bool("UYHO_TEST_BOOL", False)


def test_load_env_file_does_not_override(monkeypatch, tmp_path):
    """Values from .env never replace variables already set."""
    env_file = tmp_path / ".env"
    env_file.write_text("UYHO_TEST_A=from_file\nUYHO_TEST_B=from_file\n")
    monkeypatch.setenv("UYHO_TEST_A", "from_process")
    monkeypatch.delenv("UYHO_TEST_B", raising=False)

    assert load_env_file(str(env_file)) is True
    assert get_env_str("UYHO_TEST_A") == "from_process"
    assert get_env_str("UYHO_TEST_B") == "from_file"
