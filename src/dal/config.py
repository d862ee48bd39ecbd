from dataclasses import dataclass
from typing import Optional

from common.config.env import get_env_bool, get_env_int, get_env_str
from dal.util.env import get_provider_env

SUPPORTED_DIALECTS = {"mysql", "sqlite"}


@dataclass(frozen=True)
class PoolConfig:
    """Connection settings for the backing relational store."""

    dialect: str = "mysql"
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "uyho_db"
    max_connections: int = 10
    queue_unbounded: bool = True
    queue_limit: int = 0
    sqlite_path: Optional[str] = None

    def __post_init__(self) -> None:
        if self.dialect not in SUPPORTED_DIALECTS:
            allowed = ", ".join(sorted(SUPPORTED_DIALECTS))
            raise ValueError(f"Unsupported dialect '{self.dialect}'. Allowed values: {allowed}")
        if self.max_connections < 1:
            raise ValueError(f"max_connections must be >= 1, got {self.max_connections}.")
        if self.queue_limit < 0:
            raise ValueError(f"queue_limit must be >= 0, got {self.queue_limit}.")

    @property
    def queue_bounded(self) -> bool:
        """Return True when excess submissions beyond queue_limit are rejected."""
        return not self.queue_unbounded and self.queue_limit > 0

    def describe(self) -> str:
        """Return a credential-free description for log lines."""
        if self.dialect == "sqlite":
            return f"sqlite:{self.sqlite_path or ':memory:'}"
        return f"mysql://{self.user}@{self.host}:{self.port}/{self.database}"

    @classmethod
    def from_env(cls) -> "PoolConfig":
        """Load pool config from environment variables."""
        dialect = get_provider_env("DB_DIALECT", "mysql", SUPPORTED_DIALECTS)
        return cls(
            dialect=dialect,
            host=get_env_str("DB_HOST", "localhost"),
            port=get_env_int("DB_PORT", 3306),
            user=get_env_str("DB_USER", "root"),
            password=get_env_str("DB_PASSWORD", ""),
            database=get_env_str("DB_NAME", "uyho_db"),
            max_connections=get_env_int("DB_MAX_CONNECTIONS", 10),
            queue_unbounded=get_env_bool("DB_QUEUE_UNBOUNDED", True),
            queue_limit=get_env_int("DB_QUEUE_LIMIT", 0),
            sqlite_path=get_env_str("SQLITE_DB_PATH"),
        )
