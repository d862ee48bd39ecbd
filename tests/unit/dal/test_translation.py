import pytest

from dal.translation import (
    NOOP_QUERY,
    REWRITE_RULES,
    ddl_translator_for,
    identity,
    translate,
    translate_ddl,
    translator_for,
)


def test_autoincrement_becomes_auto_increment():
    """AUTOINCREMENT is rewritten to MySQL's AUTO_INCREMENT."""
    sql = "CREATE TABLE t (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT)"

    assert translate(sql) == "CREATE TABLE t (id INT PRIMARY KEY AUTO_INCREMENT, name TEXT)"


def test_integer_primary_key_any_whitespace():
    """INTEGER PRIMARY KEY matches across arbitrary whitespace."""
    sql = "CREATE TABLE t (id INTEGER\n   PRIMARY\tKEY)"

    assert translate(sql) == "CREATE TABLE t (id INT PRIMARY KEY)"


def test_real_rewritten_only_as_whole_word():
    """REAL becomes DOUBLE but identifiers containing it are untouched."""
    sql = "CREATE TABLE t (amount REAL, really_done INT, surreal REAL NOT NULL)"

    assert translate(sql) == (
        "CREATE TABLE t (amount DOUBLE, really_done INT, surreal DOUBLE NOT NULL)"
    )


def test_matching_is_case_insensitive():
    """Lowercase SQLite keywords are rewritten too."""
    sql = "create table t (id integer primary key autoincrement, v real)"

    assert translate(sql) == "create table t (id INT PRIMARY KEY AUTO_INCREMENT, v DOUBLE)"


def test_pragma_statement_becomes_noop():
    """A PRAGMA statement is replaced by a harmless query."""
    assert translate("PRAGMA foreign_keys = ON") == NOOP_QUERY
    assert translate("  pragma journal_mode=WAL;") == f"  {NOOP_QUERY};"


def test_pragma_mid_statement_is_not_replaced():
    """Only statements that begin with PRAGMA are neutralized."""
    sql = "SELECT 'PRAGMA' AS word"

    assert translate(sql) == sql


def test_string_literals_are_preserved():
    """Keywords inside single-quoted literals are data, not syntax."""
    sql = "INSERT INTO notes (body) VALUES ('REAL AUTOINCREMENT INTEGER PRIMARY KEY')"

    assert translate(sql) == sql


def test_escaped_quotes_inside_literal():
    """Doubled quotes do not end a literal early."""
    sql = "SELECT 'it''s real' AS a, price REAL"

    assert translate(sql) == "SELECT 'it''s real' AS a, price DOUBLE"


def test_statement_without_rewrites_is_unchanged():
    """Ordinary DML passes through untouched."""
    sql = "SELECT id, full_name FROM volunteers WHERE email = ? LIMIT 1"

    assert translate(sql) == sql


def test_translate_is_idempotent_on_its_output():
    """Translating twice yields the same result as translating once."""
    sql = "CREATE TABLE t (id INTEGER PRIMARY KEY AUTOINCREMENT, total REAL DEFAULT 0)"

    once = translate(sql)
    assert translate(once) == once


def test_rule_table_order():
    """Rules apply in a fixed, named order."""
    assert [rule.name for rule in REWRITE_RULES] == [
        "autoincrement",
        "integer_primary_key",
        "real_to_double",
    ]


def test_translator_for_dialects():
    """MySQL gets the rewrite table; SQLite statements pass through."""
    assert translator_for("mysql") is translate
    assert translator_for("sqlite") is identity
    assert identity("id INTEGER PRIMARY KEY AUTOINCREMENT") == (
        "id INTEGER PRIMARY KEY AUTOINCREMENT"
    )


def test_translator_for_unknown_dialect():
    """Unknown dialects are rejected."""
    with pytest.raises(ValueError, match="postgres"):
        translator_for("postgres")


def test_compact_create_table():
    """No SQLite-only keywords survive in a compact CREATE TABLE."""
    out = translate("CREATE TABLE t(id INTEGER PRIMARY KEY AUTOINCREMENT)")

    assert "INT PRIMARY KEY" in out
    assert "AUTO_INCREMENT" in out
    assert "AUTOINCREMENT" not in out
    assert "INTEGER" not in out


@pytest.mark.parametrize("sql", ["SELECT 'REALLY' FROM t", "SELECT 'REAL' FROM t"])
def test_real_in_literal_is_kept(sql):
    """Literal REAL text is data and stays as written."""
    assert translate(sql) == sql


def test_pragma_table_info_becomes_noop():
    """Introspection PRAGMAs become a single-row no-op query."""
    assert translate("PRAGMA table_info(t)") == NOOP_QUERY


def test_double_quoted_strings_are_preserved():
    """MySQL reads double-quoted text as a string literal, so it is never rewritten."""
    sql = 'SELECT id FROM campaigns WHERE status = "REAL"'

    assert translate(sql) == sql
    assert translate('SELECT "real" FROM t') == 'SELECT "real" FROM t'


def test_backslash_escaped_quote_inside_literal():
    """A backslash-escaped quote does not end the literal."""
    sql = "SELECT 'it\\'s REAL' AS a, price REAL"

    assert translate(sql) == "SELECT 'it\\'s REAL' AS a, price DOUBLE"


def test_backtick_identifiers_are_preserved():
    """Backtick-quoted identifiers keep their exact spelling."""
    sql = "SELECT `real`, `autoincrement` FROM t WHERE v REAL"

    assert translate(sql) == "SELECT `real`, `autoincrement` FROM t WHERE v DOUBLE"


def test_translate_ddl_keeps_updated_at_current():
    """MySQL DDL refreshes updated_at on every UPDATE."""
    sql = (
        "CREATE TABLE IF NOT EXISTS wings (id INTEGER PRIMARY KEY AUTOINCREMENT, "
        "created_at DATETIME DEFAULT CURRENT_TIMESTAMP, "
        "updated_at DATETIME DEFAULT CURRENT_TIMESTAMP)"
    )

    out = translate_ddl(sql)

    assert out == (
        "CREATE TABLE IF NOT EXISTS wings (id INT PRIMARY KEY AUTO_INCREMENT, "
        "created_at DATETIME DEFAULT CURRENT_TIMESTAMP, "
        "updated_at DATETIME DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP)"
    )
    assert translate_ddl(out) == out


def test_ordinary_statements_do_not_gain_on_update():
    """Only schema DDL gets the ON UPDATE clause."""
    sql = "SELECT 'updated_at DATETIME DEFAULT CURRENT_TIMESTAMP'"

    assert translate(sql) == sql
    assert translate_ddl(sql) == sql


def test_ddl_translator_for_dialects():
    """SQLite DDL passes through; MySQL DDL gets the full rewrite."""
    assert ddl_translator_for("mysql") is translate_ddl
    assert ddl_translator_for("sqlite") is identity
