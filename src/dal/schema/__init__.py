"""Schema bootstrap for the volunteer-management store."""

from .initializer import SchemaInitializer, SchemaReport, TableOutcome
from .tables import DEFAULT_ORGANIZATION_SETTINGS, TABLE_DEFINITIONS, TableDefinition

__all__ = [
    "DEFAULT_ORGANIZATION_SETTINGS",
    "SchemaInitializer",
    "SchemaReport",
    "TABLE_DEFINITIONS",
    "TableDefinition",
    "TableOutcome",
]
