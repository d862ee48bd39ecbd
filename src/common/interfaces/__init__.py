"""DAL interfaces shared by the pool and its drivers."""

from .statement_driver import StatementDriver, rows_as_dicts

__all__ = ["StatementDriver", "rows_as_dicts"]
