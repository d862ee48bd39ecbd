"""Bounded connection pool shared by every data-access caller."""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence, Set, TypeVar

from common.interfaces import StatementDriver
from dal.config import PoolConfig
from dal.error_classification import to_data_access_error
from dal.errors import ConnectionUnavailableError, DataAccessError, QueueFullError
from dal.query_result import RawResult
from dal.tracing import trace_query_operation

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConnectionPool:
    """Gates statement submission to at most ``max_connections`` in flight.

    Excess submissions wait in FIFO order. The wait queue is unbounded unless
    the config disables unbounded queueing and sets a positive queue limit,
    in which case submissions beyond the limit fail with ``QueueFullError``.
    Failures are never retried.
    """

    def __init__(self, config: PoolConfig, driver: StatementDriver) -> None:
        self._config = config
        self._driver = driver
        self._slots = asyncio.Semaphore(config.max_connections)
        self._open_lock = asyncio.Lock()
        self._opened = False
        self._closed = False
        self._waiting = 0
        self._in_flight = 0

    @property
    def dialect(self) -> str:
        return self._driver.dialect

    @property
    def config(self) -> PoolConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def in_flight(self) -> int:
        """Number of statements currently holding a connection."""
        return self._in_flight

    @property
    def waiting(self) -> int:
        """Number of submissions queued for a free connection."""
        return self._waiting

    async def open(self) -> None:
        """Open the driver's connections; safe to call repeatedly."""
        self._ensure_not_closed()
        async with self._open_lock:
            if self._opened:
                return
            try:
                await self._driver.open()
            except Exception as exc:
                raise to_data_access_error(self.dialect, exc) from exc
            self._opened = True
            logger.info(
                "Connection pool ready (%s, max_connections=%d)",
                self._config.describe(),
                self._config.max_connections,
            )

    async def submit(self, sql: str, params: Optional[Sequence[Any]] = None) -> RawResult:
        """Execute one target-dialect statement on a pooled connection."""

        def _run() -> Awaitable[RawResult]:
            return trace_query_operation(
                "dal.query.execute",
                provider=self.dialect,
                sql=sql,
                operation=self._driver.run(sql, params),
            )

        return await self._checked_out(_run)

    async def list_tables(self) -> Set[str]:
        """Return the names of tables that already exist in the store."""
        return await self._checked_out(self._driver.list_tables)

    async def ping(self) -> bool:
        """Run a trivial query and report whether the store is reachable."""
        try:
            await self.submit("SELECT 1")
        except DataAccessError as exc:
            logger.error("Connection check failed for %s: %s", self._config.describe(), exc)
            return False
        logger.info("Connection check succeeded for %s", self._config.describe())
        return True

    async def close(self) -> None:
        """Release every pooled connection. Later submissions fail."""
        if self._closed:
            return
        self._closed = True
        try:
            await self._driver.close()
        except Exception as exc:
            raise to_data_access_error(self.dialect, exc) from exc
        logger.info("Connection pool closed (%s)", self._config.describe())

    async def _checked_out(self, operation: Callable[[], Awaitable[T]]) -> T:
        self._ensure_not_closed()
        if (
            self._config.queue_bounded
            and self._slots.locked()
            and self._waiting >= self._config.queue_limit
        ):
            raise QueueFullError(
                f"Connection queue limit reached ({self._config.queue_limit} waiting)."
            )

        self._waiting += 1
        try:
            await self._slots.acquire()
        finally:
            self._waiting -= 1

        self._in_flight += 1
        try:
            self._ensure_not_closed()
            if not self._opened:
                await self.open()
            return await operation()
        except DataAccessError:
            raise
        except Exception as exc:
            raise to_data_access_error(self.dialect, exc) from exc
        finally:
            self._in_flight -= 1
            self._slots.release()

    def _ensure_not_closed(self) -> None:
        if self._closed:
            raise ConnectionUnavailableError("Connection pool is closed.")
