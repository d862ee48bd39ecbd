"""Unit test environment helpers."""

import pytest

_DB_ENV_VARS = (
    "DB_DIALECT",
    "DB_HOST",
    "DB_PORT",
    "DB_USER",
    "DB_PASSWORD",
    "DB_NAME",
    "DB_MAX_CONNECTIONS",
    "DB_QUEUE_UNBOUNDED",
    "DB_QUEUE_LIMIT",
    "SQLITE_DB_PATH",
)


@pytest.fixture(autouse=True)
def _minimal_env(monkeypatch):
    """Clear store settings and tracing switches so defaults apply."""
    for name in _DB_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DAL_TRACE_QUERIES", "false")
    monkeypatch.setenv("OTEL_DISABLE_EXPORTER", "true")
    yield
