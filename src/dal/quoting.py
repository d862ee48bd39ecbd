"""Quote-aware splitting of SQL text as the MySQL lexer reads it."""

from typing import Iterator, Tuple

QUOTE_CHARS = ("'", '"', "`")


def split_quoted(sql: str) -> Iterator[Tuple[bool, str]]:
    """Yield (is_quoted, text) segments; quoted segments keep their quotes.

    Single-quoted and double-quoted strings honour both doubled quotes and
    backslash escapes. Backtick identifiers only honour doubled backticks.
    An unterminated quoted span runs to the end of the statement.
    """
    start = 0
    i = 0
    length = len(sql)
    while i < length:
        quote = sql[i]
        if quote not in QUOTE_CHARS:
            i += 1
            continue
        if i > start:
            yield False, sql[start:i]
        start = i
        i += 1
        while i < length:
            ch = sql[i]
            if ch == "\\" and quote != "`":
                i += 2
                continue
            if ch == quote:
                if i + 1 < length and sql[i + 1] == quote:
                    i += 2
                    continue
                break
            i += 1
        i = min(i + 1, length)
        yield True, sql[start:i]
        start = i
    if start < length:
        yield False, sql[start:]
