from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from dal.errors import ConnectionUnavailableError, DataAccessError, StatementError

logger = logging.getLogger(__name__)

# MySQL server/client error codes that mean no usable connection.
MYSQL_CONNECTIVITY_CODES = frozenset(
    {
        1040,  # too many connections
        1045,  # access denied
        1049,  # unknown database
        1129,  # host blocked
        2002,  # can't connect through socket
        2003,  # can't connect to server
        2005,  # unknown host
        2006,  # server has gone away
        2013,  # lost connection during query
    }
)
MYSQL_TABLE_EXISTS = 1050
MYSQL_DUPLICATE_ENTRY = 1062


@dataclass(frozen=True)
class ErrorClassification:
    """Provider-aware classification of a raw driver exception."""

    category: str
    provider: str
    code: Optional[int] = None

    @property
    def is_connectivity(self) -> bool:
        return self.category == "connectivity"


def classify_error(provider: str, exc: BaseException) -> ErrorClassification:
    """Classify a driver error as connectivity, already_exists, duplicate or statement."""
    message = str(exc).lower()
    provider = (provider or "unknown").lower()
    code = _mysql_error_code(exc)

    if isinstance(exc, (ConnectionError, TimeoutError)):
        return ErrorClassification("connectivity", provider, code)

    if code is not None:
        if code in MYSQL_CONNECTIVITY_CODES:
            return ErrorClassification("connectivity", provider, code)
        if code == MYSQL_TABLE_EXISTS:
            return ErrorClassification("already_exists", provider, code)
        if code == MYSQL_DUPLICATE_ENTRY:
            return ErrorClassification("duplicate", provider, code)

    if _matches_any(
        message,
        (
            "unable to open database",
            "could not connect",
            "can't connect",
            "connection refused",
            "connection reset",
            "lost connection",
        ),
    ):
        return ErrorClassification("connectivity", provider, code)
    if "already exists" in message:
        return ErrorClassification("already_exists", provider, code)
    if _matches_any(message, ("unique constraint failed", "duplicate entry")):
        return ErrorClassification("duplicate", provider, code)
    if isinstance(exc, OSError):
        return ErrorClassification("connectivity", provider, code)

    return ErrorClassification("statement", provider, code)


def to_data_access_error(provider: str, exc: BaseException) -> DataAccessError:
    """Wrap a raw driver exception in the data-access taxonomy."""
    if isinstance(exc, DataAccessError):
        return exc

    info = classify_error(provider, exc)
    message = str(exc) or exc.__class__.__name__
    if info.is_connectivity:
        error: DataAccessError = ConnectionUnavailableError(message)
    else:
        error = StatementError(
            message,
            code=info.code,
            already_exists=info.category == "already_exists",
            duplicate_key=info.category == "duplicate",
        )
    error.__cause__ = exc
    logger.debug("Classified %s error as %s: %s", provider, info.category, message)
    return error


def _mysql_error_code(exc: BaseException) -> Optional[int]:
    # pymysql (and therefore aiomysql) errors carry (code, message) in args.
    args = getattr(exc, "args", ())
    if args and isinstance(args[0], int) and not isinstance(args[0], bool):
        return args[0]
    return None


def _matches_any(text: str, fragments: tuple[str, ...]) -> bool:
    return any(fragment in text for fragment in fragments)
