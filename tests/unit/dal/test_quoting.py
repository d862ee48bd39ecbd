from dal.quoting import split_quoted


def test_split_quoted_segments():
    """Each quoting style becomes one opaque segment."""
    sql = "SELECT 'a', \"b\", `c` FROM t"

    assert list(split_quoted(sql)) == [
        (False, "SELECT "),
        (True, "'a'"),
        (False, ", "),
        (True, '"b"'),
        (False, ", "),
        (True, "`c`"),
        (False, " FROM t"),
    ]


def test_split_quoted_escapes():
    """Doubled quotes and backslashes stay inside their literal."""
    sql = "'it''s' \"say \\\"hi\\\"\" `a``b`"

    quoted = [segment for is_quoted, segment in split_quoted(sql) if is_quoted]

    assert quoted == ["'it''s'", '"say \\"hi\\""', "`a``b`"]


def test_backslash_is_literal_in_backticks():
    """Backticks do not honour backslash escapes."""
    assert list(split_quoted("`a\\` x")) == [(True, "`a\\`"), (False, " x")]


def test_unterminated_literal_runs_to_end():
    """An unclosed quote swallows the rest of the statement."""
    assert list(split_quoted("SELECT 'open REAL")) == [(False, "SELECT "), (True, "'open REAL")]
