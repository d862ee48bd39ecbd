import pytest

from dal.config import PoolConfig
from dal.util.env import get_provider_env, normalize_provider


def test_from_env_defaults():
    """Missing variables fall back to the documented defaults."""
    config = PoolConfig.from_env()

    assert config.dialect == "mysql"
    assert config.host == "localhost"
    assert config.port == 3306
    assert config.user == "root"
    assert config.password == ""
    assert config.database == "uyho_db"
    assert config.max_connections == 10
    assert config.queue_unbounded is True
    assert config.queue_limit == 0
    assert config.queue_bounded is False


def test_from_env_overrides(monkeypatch):
    """Every field is read from its environment variable."""
    monkeypatch.setenv("DB_DIALECT", "MariaDB")
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_PORT", "3307")
    monkeypatch.setenv("DB_USER", "uyho")
    monkeypatch.setenv("DB_PASSWORD", "secret")
    monkeypatch.setenv("DB_NAME", "uyho_prod")
    monkeypatch.setenv("DB_MAX_CONNECTIONS", "4")
    monkeypatch.setenv("DB_QUEUE_UNBOUNDED", "false")
    monkeypatch.setenv("DB_QUEUE_LIMIT", "20")

    config = PoolConfig.from_env()

    assert config.dialect == "mysql"
    assert config.host == "db.internal"
    assert config.port == 3307
    assert config.password == "secret"
    assert config.database == "uyho_prod"
    assert config.max_connections == 4
    assert config.queue_bounded is True
    assert config.queue_limit == 20


def test_from_env_sqlite(monkeypatch, tmp_path):
    """SQLite dialect picks up the database path."""
    path = str(tmp_path / "uyho.db")
    monkeypatch.setenv("DB_DIALECT", "sqlite3")
    monkeypatch.setenv("SQLITE_DB_PATH", path)

    config = PoolConfig.from_env()

    assert config.dialect == "sqlite"
    assert config.sqlite_path == path
    assert config.describe() == f"sqlite:{path}"


def test_from_env_rejects_unknown_dialect(monkeypatch):
    """Unsupported dialects fail fast at startup."""
    monkeypatch.setenv("DB_DIALECT", "oracle")

    with pytest.raises(ValueError, match="Invalid provider for DB_DIALECT"):
        PoolConfig.from_env()


def test_from_env_rejects_bad_port(monkeypatch):
    """Non-numeric ports are rejected."""
    monkeypatch.setenv("DB_PORT", "mysql")

    with pytest.raises(ValueError, match="DB_PORT"):
        PoolConfig.from_env()


@pytest.mark.parametrize("kwargs", [{"max_connections": 0}, {"queue_limit": -1}])
def test_invalid_limits_rejected(kwargs):
    """Pool sizes below one and negative queue limits are invalid."""
    with pytest.raises(ValueError):
        PoolConfig(**kwargs)


def test_queue_limit_ignored_when_unbounded():
    """A queue limit only applies when unbounded queueing is disabled."""
    assert PoolConfig(queue_unbounded=True, queue_limit=5).queue_bounded is False
    assert PoolConfig(queue_unbounded=False, queue_limit=0).queue_bounded is False


def test_describe_omits_password():
    """Log descriptions never include credentials."""
    config = PoolConfig(user="uyho", password="hunter2", host="db", port=3306, database="uyho_db")

    assert config.describe() == "mysql://uyho@db:3306/uyho_db"
    assert "hunter2" not in config.describe()


def test_normalize_provider_aliases():
    """Aliases collapse to canonical dialect IDs."""
    assert normalize_provider(" MySQL ") == "mysql"
    assert normalize_provider("mariadb") == "mysql"
    assert normalize_provider("sqlite3") == "sqlite"


def test_get_provider_env_default(monkeypatch):
    """An unset variable returns the default untouched."""
    monkeypatch.delenv("DB_DIALECT", raising=False)

    assert get_provider_env("DB_DIALECT", "mysql", {"mysql", "sqlite"}) == "mysql"
