"""SQLite-backed DAL components."""

from .driver import SqliteDriver

__all__ = ["SqliteDriver"]
