"""Exception taxonomy for the data-access layer."""

from typing import Optional


class DataAccessError(Exception):
    """Base class for every failure reported by the data-access layer."""


class ConnectionUnavailableError(DataAccessError):
    """The pool could not provide or use a connection to the backing store."""


class QueueFullError(ConnectionUnavailableError):
    """The pool's wait queue is at its configured limit."""


class StatementError(DataAccessError):
    """The backing store rejected a statement."""

    def __init__(
        self,
        message: str,
        *,
        code: Optional[int] = None,
        already_exists: bool = False,
        duplicate_key: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.already_exists = already_exists
        self.duplicate_key = duplicate_key
