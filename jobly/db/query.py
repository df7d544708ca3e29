"""
Execution of SQL written with ``$n`` positional placeholders.

Statements in the services are written with ``$1, $2, ...`` so that the
composers in jobly.db.sql can number their fragments. ``run_sql`` rebinds
those to SQLAlchemy named parameters (``:p1, :p2, ...``) before executing, so
values never end up in the SQL text.
"""
import re
from typing import Any, Dict, List, Sequence

from sqlalchemy import text
from sqlalchemy.orm import Session

PLACEHOLDER_RE = re.compile(r"\$(\d+)")


def bind_positional(sql: str, values: Sequence[Any]):
    """
    Rewrite ``$n`` placeholders to named binds.

    Returns (TextClause, params). Every placeholder must have a value.
    """
    def _replace(match):
        index = int(match.group(1))
        if index < 1 or index > len(values):
            raise ValueError(f"No value for placeholder ${index}")
        return f":p{index}"

    statement = text(PLACEHOLDER_RE.sub(_replace, sql))
    params = {f"p{i}": value for i, value in enumerate(values, start=1)}
    return statement, params


def run_sql(db: Session, sql: str, values: Sequence[Any] = ()) -> List[Dict[str, Any]]:
    """Execute ``sql`` and return the rows as plain dicts (empty for DML without RETURNING)."""
    statement, params = bind_positional(sql, values)
    result = db.execute(statement, params)
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings().all()]
