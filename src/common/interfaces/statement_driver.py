from typing import Any, List, Optional, Protocol, Sequence, Set, runtime_checkable

from dal.query_result import RawResult


@runtime_checkable
class StatementDriver(Protocol):
    """Protocol for a dialect-specific backend behind the connection pool.

    A driver owns the physical connections. Each ``run`` call checks a
    connection out for exactly one statement and returns it afterwards.
    """

    dialect: str

    async def open(self) -> None:
        """Create the underlying connections (or pool)."""
        ...

    async def run(self, sql: str, params: Optional[Sequence[Any]] = None) -> RawResult:
        """Execute one target-dialect statement and return its raw outcome.

        Raw driver exceptions propagate; the pool classifies them.
        """
        ...

    async def list_tables(self) -> Set[str]:
        """Return the names of existing base tables."""
        ...

    async def close(self) -> None:
        """Release every connection held by the driver."""
        ...


def rows_as_dicts(rows: Optional[List[Any]]) -> List[dict]:
    """Normalize driver row objects into plain dicts."""
    return [dict(row) for row in rows or []]
