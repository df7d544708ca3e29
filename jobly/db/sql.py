"""
SQL composition helpers shared by every entity service.

Both helpers are pure: they build statement fragments with ``$n`` positional
placeholders plus the matching values, and leave execution to
jobly.db.query.run_sql.
"""
from typing import Any, List, Mapping, Optional, Tuple

from jobly.core.errors import BadRequestError

LIKE_ESCAPE = "!"


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Optional[Mapping[str, str]] = None,
) -> Tuple[List[str], List[Any]]:
    """
    Build the SET part of an UPDATE from a sparse field map.

    Args:
        data_to_update: {logical field name: new value}, only fields to change
        js_to_sql: {logical field name: column name} for fields whose column
            is named differently; other fields use their own name

    Returns:
        (set_cols, values), e.g. for {"firstName": "Aliya", "age": 32}
        with {"firstName": "first_name"}:
        (["first_name = $1", "age = $2"], ["Aliya", 32])

    Raises:
        BadRequestError: if there is nothing to update
    """
    keys = list(data_to_update.keys())
    if not keys:
        raise BadRequestError("No data")

    js_to_sql = js_to_sql or {}
    set_cols = [
        f"{js_to_sql.get(key, key)} = ${idx}"
        for idx, key in enumerate(keys, start=1)
    ]
    values = [data_to_update[key] for key in keys]
    return set_cols, values


def escape_like(pattern: str) -> str:
    """Escape LIKE metacharacters so ``pattern`` matches literally."""
    return (
        pattern.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def sql_for_filters(
    number_column: str,
    text_column: str,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
    pattern: Optional[str] = None,
) -> Tuple[str, List[Any]]:
    """
    Build a null-safe WHERE predicate for range + substring filtering.

    Every clause reads ``(CAST($n AS TYPE) IS NULL OR <comparison>)``, so a
    filter left as None constrains nothing and one statement text serves every
    combination of present and absent filters. Bounds are inclusive; the
    substring match is case-insensitive and may occur anywhere in the text.

    ``minimum <= maximum`` is not checked here; callers validate it.

    Returns:
        (predicate, values) with placeholders $1..$3
    """
    predicate = (
        f"(CAST($1 AS INTEGER) IS NULL OR {number_column} >= $1)"
        f" AND (CAST($2 AS INTEGER) IS NULL OR {number_column} <= $2)"
        f" AND (CAST($3 AS VARCHAR) IS NULL"
        f" OR lower({text_column}) LIKE '%' || lower($3) || '%' ESCAPE '{LIKE_ESCAPE}')"
    )
    values: List[Any] = [
        minimum,
        maximum,
        escape_like(pattern) if pattern is not None else None,
    ]
    return predicate, values
