"""Data Abstraction Layer (DAL) for the volunteer-management backend.

The pool (``dal.pool``), the callback-style compatibility shim used by route
handlers (``dal.shim``) and the startup wiring (``dal.context``) are imported
from their modules. This package re-exports the lightweight value types,
errors and the SQLite-to-MySQL dialect translator.
"""

from dal.config import PoolConfig
from dal.errors import ConnectionUnavailableError, DataAccessError, QueueFullError, StatementError
from dal.query_result import ExecutionContext
from dal.translation import translate, translator_for

__all__ = [
    "ConnectionUnavailableError",
    "DataAccessError",
    "ExecutionContext",
    "PoolConfig",
    "QueueFullError",
    "StatementError",
    "translate",
    "translator_for",
]
