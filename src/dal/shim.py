"""Callback-style query API shared by every route handler.

Handlers are written against the embedded SQLite driver's conventions:
``?`` placeholders, SQLite keywords, and completion callbacks. The shim keeps
that contract stable whichever store backs the pool. Each operation
translates the statement for the pool's dialect, submits it, and shapes the
raw result:

- ``execute``    -> ``callback(None, ExecutionContext)``
- ``fetch_one``  -> ``callback(None, row_or_None)``
- ``fetch_all``  -> ``callback(None, rows)``, ``rows`` is ``[]`` when nothing matched
- ``execute_raw`` -> ``callback(None)``

Failures go to the callback's error slot. When no callback is given the
error is raised to the awaiting caller instead.
"""

import inspect
import logging
from typing import Any, Callable, List, Optional, Sequence

from dal.errors import DataAccessError
from dal.pool import ConnectionPool
from dal.query_result import ExecutionContext, Row
from dal.translation import translator_for

logger = logging.getLogger(__name__)

Callback = Callable[..., Any]


class CompatibilityShim:
    """Dialect-independent execute/fetch_one/fetch_all/execute_raw facade."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool
        self._translate = translator_for(pool.dialect)

    @property
    def dialect(self) -> str:
        return self._pool.dialect

    async def execute(
        self,
        sql: str,
        params: Optional[Sequence[Any]] = None,
        callback: Optional[Callback] = None,
    ) -> Optional[ExecutionContext]:
        """Run an INSERT/UPDATE/DELETE/CREATE statement."""
        try:
            raw = await self._pool.submit(self._translate(sql), params)
        except DataAccessError as exc:
            return await self._fail(callback, exc, None)
        context = ExecutionContext.from_raw(raw)
        await _notify(callback, None, context)
        return context

    async def fetch_one(
        self,
        sql: str,
        params: Optional[Sequence[Any]] = None,
        callback: Optional[Callback] = None,
    ) -> Optional[Row]:
        """Return the first matching row, or None."""
        try:
            raw = await self._pool.submit(self._translate(sql), params)
        except DataAccessError as exc:
            return await self._fail(callback, exc, None)
        row = raw.rows[0] if raw.rows else None
        await _notify(callback, None, row)
        return row

    async def fetch_all(
        self,
        sql: str,
        params: Optional[Sequence[Any]] = None,
        callback: Optional[Callback] = None,
    ) -> List[Row]:
        """Return every matching row; an empty list when nothing matched."""
        try:
            raw = await self._pool.submit(self._translate(sql), params)
        except DataAccessError as exc:
            return await self._fail(callback, exc, [])
        rows = list(raw.rows)
        await _notify(callback, None, rows)
        return rows

    async def execute_raw(self, sql: str, callback: Optional[Callback] = None) -> None:
        """Run an administrative or migration statement without parameters."""
        try:
            await self._pool.submit(self._translate(sql))
        except DataAccessError as exc:
            await self._fail(callback, exc, None, with_value=False)
            return
        await _notify(callback, None)

    async def close(self, callback: Optional[Callback] = None) -> None:
        """Release the pool; later operations report ConnectionUnavailableError."""
        try:
            await self._pool.close()
        except DataAccessError as exc:
            await self._fail(callback, exc, None, with_value=False)
            return
        await _notify(callback, None)

    async def _fail(
        self,
        callback: Optional[Callback],
        error: DataAccessError,
        empty: Any,
        with_value: bool = True,
    ) -> Any:
        if callback is None:
            raise error
        logger.debug("Reporting %s to callback: %s", type(error).__name__, error)
        if with_value:
            await _notify(callback, error, empty)
        else:
            await _notify(callback, error)
        return empty


async def _notify(callback: Optional[Callback], *args: Any) -> None:
    if callback is None:
        return
    result = callback(*args)
    if inspect.isawaitable(result):
        await result
