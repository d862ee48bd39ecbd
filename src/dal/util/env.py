"""Dialect normalization helpers for environment configuration.

Canonical dialect IDs (internal, lowercase):
- "mysql" - MySQL and MariaDB servers
- "sqlite" - local SQLite files or in-memory databases

Example:
    >>> normalize_provider("MariaDB")
    'mysql'
    >>> get_provider_env("DB_DIALECT", "mysql", {"mysql", "sqlite"})
    'mysql'
"""

from typing import Set

from common.config.env import get_env_str

# Alias mappings: user-friendly names -> canonical dialect ID
PROVIDER_ALIASES: dict[str, str] = {
    "mysql": "mysql",
    "mariadb": "mysql",
    "sqlite": "sqlite",
    "sqlite3": "sqlite",
}


def normalize_provider(value: str) -> str:
    """Normalize a dialect value to its canonical form.

    Unknown values pass through lowercased and stripped; validation happens
    in ``get_provider_env``.
    """
    cleaned = value.strip().lower()
    return PROVIDER_ALIASES.get(cleaned, cleaned)


def get_provider_env(var_name: str, default: str, allowed: Set[str]) -> str:
    """Read, normalize and validate a dialect environment variable.

    Raises:
        ValueError: If the normalized value is not in the allowed set.
    """
    raw_value = get_env_str(var_name)

    if raw_value is None:
        return default

    normalized = normalize_provider(raw_value)

    if normalized not in allowed:
        allowed_list = ", ".join(sorted(allowed))
        raise ValueError(
            f"Invalid provider for {var_name}: '{raw_value}'. " f"Allowed values: {allowed_list}"
        )

    return normalized
