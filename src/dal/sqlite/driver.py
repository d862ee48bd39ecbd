import logging
import sqlite3
from typing import Any, Optional, Sequence, Set

import aiosqlite

from common.interfaces import rows_as_dicts
from dal.config import PoolConfig
from dal.query_result import RawResult

logger = logging.getLogger(__name__)

LIST_TABLES_QUERY = (
    "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
)


class SqliteDriver:
    """SQLite statement driver for local development and tests.

    SQLite serializes writers, so a single autocommit connection is shared;
    the pool in front of it still bounds how many statements are in flight.
    """

    dialect = "sqlite"

    def __init__(self, config: PoolConfig) -> None:
        self._db_path = config.sqlite_path or ":memory:"
        self._conn: Optional[aiosqlite.Connection] = None

    async def open(self) -> None:
        if self._conn is not None:
            return
        conn = await aiosqlite.connect(self._db_path, isolation_level=None)
        conn.row_factory = sqlite3.Row
        await conn.execute("PRAGMA foreign_keys = ON")
        self._conn = conn
        logger.info("SQLite connection opened at %s", self._db_path)

    async def run(self, sql: str, params: Optional[Sequence[Any]] = None) -> RawResult:
        if self._conn is None:
            raise RuntimeError("SQLite connection not open. Call SqliteDriver.open().")

        cursor = await self._conn.execute(sql, list(params or []))
        try:
            rows = await cursor.fetchall() if cursor.description else []
            return RawResult(
                insert_id=cursor.lastrowid,
                affected_rows=max(cursor.rowcount, 0),
                rows=rows_as_dicts(rows),
            )
        finally:
            await cursor.close()

    async def list_tables(self) -> Set[str]:
        result = await self.run(LIST_TABLES_QUERY)
        return {row["name"] for row in result.rows}

    async def close(self) -> None:
        """Close the shared SQLite connection."""
        if self._conn is not None:
            await self._conn.close()
            self._conn = None
