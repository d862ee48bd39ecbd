import logging
from typing import Any, Optional, Sequence, Set

import aiomysql

from dal.config import PoolConfig
from dal.mysql.param_translation import translate_qmark_params_to_mysql
from dal.query_result import RawResult

logger = logging.getLogger(__name__)

LIST_TABLES_QUERY = """
    SELECT table_name AS table_name
    FROM information_schema.tables
    WHERE table_schema = DATABASE()
    AND table_type = 'BASE TABLE'
"""


class MysqlDriver:
    """MySQL statement driver backed by an aiomysql pool."""

    dialect = "mysql"

    def __init__(self, config: PoolConfig) -> None:
        self._config = config
        self._pool: Optional[aiomysql.Pool] = None

    async def open(self) -> None:
        """Create the aiomysql pool; connections are opened lazily on demand."""
        if self._pool is not None:
            return
        self._pool = await aiomysql.create_pool(
            host=self._config.host,
            port=self._config.port,
            user=self._config.user,
            password=self._config.password,
            db=self._config.database,
            minsize=0,
            maxsize=self._config.max_connections,
            autocommit=True,
            cursorclass=aiomysql.DictCursor,
        )
        logger.info("MySQL pool created for %s", self._config.describe())

    async def run(self, sql: str, params: Optional[Sequence[Any]] = None) -> RawResult:
        if self._pool is None:
            raise RuntimeError("MySQL pool not initialized. Call MysqlDriver.open().")

        sql, bound_params = translate_qmark_params_to_mysql(sql, params)
        async with self._pool.acquire() as conn:
            async with conn.cursor() as cursor:
                await cursor.execute(sql, bound_params)
                rows = await cursor.fetchall() if cursor.description else []
                return RawResult(
                    insert_id=cursor.lastrowid,
                    affected_rows=cursor.rowcount,
                    rows=[dict(row) for row in rows],
                )

    async def list_tables(self) -> Set[str]:
        result = await self.run(LIST_TABLES_QUERY)
        return {row["table_name"] for row in result.rows}

    async def close(self) -> None:
        """Close MySQL resources."""
        if self._pool is not None:
            self._pool.close()
            await self._pool.wait_closed()
            self._pool = None
