"""SQLite-to-MySQL statement rewriting.

Call sites are written in SQLite surface syntax. Before a statement reaches a
MySQL pool it passes through an ordered table of rewrite rules covering the
small, fixed set of syntactic differences the application relies on. Rules
never touch text inside quoted strings or backtick identifiers.

Schema DDL goes through one extra step so MySQL keeps ``updated_at`` columns
current on every UPDATE, which SQLite cannot express in a column definition.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from dal.quoting import split_quoted

NOOP_QUERY = "SELECT 1"


@dataclass(frozen=True)
class RewriteRule:
    """A single case-insensitive keyword rewrite."""

    name: str
    pattern: re.Pattern
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _rule(name: str, source: str, replacement: str, whole_word: bool = True) -> RewriteRule:
    if whole_word:
        source = rf"\b{source}\b"
    return RewriteRule(name, re.compile(source, re.IGNORECASE), replacement)


REWRITE_RULES: Tuple[RewriteRule, ...] = (
    _rule("autoincrement", r"AUTOINCREMENT", "AUTO_INCREMENT"),
    _rule("integer_primary_key", r"INTEGER\s+PRIMARY\s+KEY", "INT PRIMARY KEY"),
    _rule("real_to_double", r"REAL", "DOUBLE"),
)

DDL_REWRITE_RULES: Tuple[RewriteRule, ...] = (
    _rule(
        "updated_at_on_update",
        r"(\bupdated_at\s+DATETIME\s+DEFAULT\s+CURRENT_TIMESTAMP\b)(?!\s+ON\s+UPDATE)",
        r"\1 ON UPDATE CURRENT_TIMESTAMP",
        whole_word=False,
    ),
)

# A statement that starts with PRAGMA, up to (not including) its terminator.
PRAGMA_PATTERN = re.compile(r"^(\s*)PRAGMA\b[^;]*", re.IGNORECASE)


def translate(sql: str) -> str:
    """Rewrite a SQLite-syntax statement into MySQL syntax.

    Total and pure: statements with nothing to rewrite come back unchanged.
    """
    if PRAGMA_PATTERN.match(sql):
        return PRAGMA_PATTERN.sub(lambda m: m.group(1) + NOOP_QUERY, sql, count=1)
    return _apply_unquoted(sql, REWRITE_RULES)


def translate_ddl(sql: str) -> str:
    """Rewrite a SQLite-syntax CREATE TABLE statement into MySQL DDL."""
    return _apply_unquoted(translate(sql), DDL_REWRITE_RULES)


def identity(sql: str) -> str:
    """Return the statement unchanged."""
    return sql


def translator_for(dialect: str) -> Callable[[str], str]:
    """Return the rewrite function for statements bound for ``dialect``."""
    if dialect == "mysql":
        return translate
    if dialect == "sqlite":
        return identity
    raise ValueError(f"No statement translator for dialect '{dialect}'.")


def ddl_translator_for(dialect: str) -> Callable[[str], str]:
    """Return the rewrite function for schema DDL bound for ``dialect``."""
    if dialect == "mysql":
        return translate_ddl
    return translator_for(dialect)


def _apply_unquoted(sql: str, rules: Sequence[RewriteRule]) -> str:
    parts: List[str] = []
    for is_quoted, segment in split_quoted(sql):
        if not is_quoted:
            for rule in rules:
                segment = rule.apply(segment)
        parts.append(segment)
    return "".join(parts)
