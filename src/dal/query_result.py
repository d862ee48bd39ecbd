from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

Row = Dict[str, Any]


@dataclass
class RawResult:
    """Driver-level outcome of one statement."""

    insert_id: Optional[int] = None
    affected_rows: int = 0
    rows: List[Row] = field(default_factory=list)


@dataclass(frozen=True)
class ExecutionContext:
    """Effect of an INSERT/UPDATE/DELETE/DDL statement handed to callbacks."""

    last_insert_id: Optional[int]
    rows_affected: int

    @classmethod
    def from_raw(cls, raw: RawResult) -> "ExecutionContext":
        return cls(last_insert_id=raw.insert_id, rows_affected=raw.affected_rows)
