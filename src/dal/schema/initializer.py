"""Create-if-absent schema bootstrap and organization settings seeding."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple

from dal.errors import DataAccessError, StatementError
from dal.pool import ConnectionPool
from dal.schema.tables import (
    DEFAULT_ORGANIZATION_SETTINGS,
    SETTINGS_TABLE,
    TABLE_DEFINITIONS,
    TableDefinition,
)
from dal.translation import ddl_translator_for, translator_for

logger = logging.getLogger(__name__)

CREATED = "created"
ALREADY_EXISTED = "already_existed"
FAILED = "failed"

SEED_SEEDED = "seeded"
SEED_PRESENT = "present"
SEED_SKIPPED = "skipped"
SEED_FAILED = "failed"


@dataclass(frozen=True)
class TableOutcome:
    """Result of creating one table."""

    name: str
    status: str
    error: Optional[str] = None


@dataclass
class SchemaReport:
    """Per-table outcomes plus the seed status of one initialization run."""

    tables: List[TableOutcome] = field(default_factory=list)
    seed: str = SEED_SKIPPED
    seed_error: Optional[str] = None

    @property
    def created(self) -> List[str]:
        return [t.name for t in self.tables if t.status == CREATED]

    @property
    def failed(self) -> List[str]:
        return [t.name for t in self.tables if t.status == FAILED]

    @property
    def ok(self) -> bool:
        """True when every table exists and the seed did not fail."""
        return not self.failed and self.seed != SEED_FAILED

    def status_of(self, table: str) -> Optional[str]:
        for outcome in self.tables:
            if outcome.name == table:
                return outcome.status
        return None


class SchemaInitializer:
    """Creates every table that does not exist yet and seeds default settings.

    Safe to run on every boot. Existing tables and rows are never altered or
    dropped. A table that fails to create is logged and initialization moves
    on to the next one, so a single bad definition cannot keep the process
    from serving requests.
    """

    def __init__(
        self,
        pool: ConnectionPool,
        tables: Sequence[TableDefinition] = TABLE_DEFINITIONS,
    ) -> None:
        self._pool = pool
        self._tables = tuple(tables)
        self._translate = translator_for(pool.dialect)
        self._translate_ddl = ddl_translator_for(pool.dialect)

    async def initialize(self) -> SchemaReport:
        report = SchemaReport()
        existing = await self._existing_tables()

        logger.info("Initializing schema (%d tables, %s)", len(self._tables), self._pool.dialect)
        for table in self._tables:
            outcome = await self._create_table(table, existing)
            report.tables.append(outcome)

        report.seed, report.seed_error = await self._seed_settings()

        logger.info(
            "Schema initialization finished: %d created, %d failed, seed %s",
            len(report.created),
            len(report.failed),
            report.seed,
        )
        return report

    async def _existing_tables(self) -> Set[str]:
        try:
            return {name.lower() for name in await self._pool.list_tables()}
        except DataAccessError as exc:
            logger.debug("Table introspection unavailable: %s", exc)
            return set()

    async def _create_table(self, table: TableDefinition, existing: Set[str]) -> TableOutcome:
        already_present = table.name.lower() in existing
        try:
            await self._pool.submit(self._translate_ddl(table.ddl))
        except StatementError as exc:
            if exc.already_exists:
                logger.info("Table %s already exists: %s", table.name, exc)
                return TableOutcome(table.name, ALREADY_EXISTED)
            logger.error("Error creating table %s: %s", table.name, exc)
            return TableOutcome(table.name, FAILED, str(exc))
        except DataAccessError as exc:
            logger.error("Error creating table %s: %s", table.name, exc)
            return TableOutcome(table.name, FAILED, str(exc))

        if already_present:
            return TableOutcome(table.name, ALREADY_EXISTED)
        logger.info("Table %s ready", table.name)
        return TableOutcome(table.name, CREATED)

    async def _seed_settings(self) -> Tuple[str, Optional[str]]:
        try:
            result = await self._pool.submit(
                self._translate(f"SELECT COUNT(*) AS count FROM {SETTINGS_TABLE}")
            )
        except DataAccessError as exc:
            logger.debug("Skipping %s seed: %s", SETTINGS_TABLE, exc)
            return SEED_SKIPPED, None

        if _first_count(result.rows) > 0:
            return SEED_PRESENT, None

        columns = list(DEFAULT_ORGANIZATION_SETTINGS)
        placeholders = ", ".join("?" for _ in columns)
        insert = (
            f"INSERT INTO {SETTINGS_TABLE} ({', '.join(columns)}) VALUES ({placeholders})"
        )
        try:
            await self._pool.submit(
                self._translate(insert), [DEFAULT_ORGANIZATION_SETTINGS[c] for c in columns]
            )
        except StatementError as exc:
            if exc.duplicate_key:
                logger.info("%s already seeded by another instance", SETTINGS_TABLE)
                return SEED_PRESENT, None
            logger.error("Error seeding %s: %s", SETTINGS_TABLE, exc)
            return SEED_FAILED, str(exc)
        except DataAccessError as exc:
            logger.error("Error seeding %s: %s", SETTINGS_TABLE, exc)
            return SEED_FAILED, str(exc)

        logger.info("Seeded default %s row", SETTINGS_TABLE)
        return SEED_SEEDED, None


def _first_count(rows) -> int:
    if not rows:
        return 0
    row = rows[0]
    value = row.get("count") if "count" in row else next(iter(row.values()), 0)
    return int(value or 0)
