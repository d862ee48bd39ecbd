from typing import Any, List, Optional, Sequence, Tuple

from dal.quoting import split_quoted


def translate_qmark_params_to_mysql(
    sql: str, params: Optional[Sequence[Any]]
) -> Tuple[str, Optional[List[Any]]]:
    """Translate SQLite-style ? placeholders to MySQL %s placeholders.

    Placeholders inside quoted strings and backtick identifiers are left
    alone. When parameters are bound, every literal % is doubled because the
    driver interpolates the whole statement with the % operator.
    """
    bound = list(params or [])
    result = []
    placeholders = 0
    for is_quoted, segment in split_quoted(sql):
        if bound:
            segment = segment.replace("%", "%%")
        if not is_quoted:
            placeholders += segment.count("?")
            segment = segment.replace("?", "%s")
        result.append(segment)

    if placeholders != len(bound):
        raise ValueError(
            f"Placeholder count mismatch: statement has {placeholders} '?' placeholders, "
            f"got {len(bound)} parameters."
        )
    if not bound:
        return sql, None
    return "".join(result), bound
