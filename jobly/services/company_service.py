"""
Company data access.

All statements are parameterized; updates and list filters go through the
shared composers in jobly.db.sql.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.core.errors import BadRequestError, NotFoundError
from jobly.db.query import run_sql
from jobly.db.sql import sql_for_partial_update, sql_for_filters

logger = logging.getLogger(__name__)

# Logical (API) field name -> column, for fields whose names differ
COMPANY_COLUMNS = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

COMPANY_FIELDS = "handle, name, description, num_employees, logo_url"


def create_company(db: Session, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Insert a company.

    Raises:
        BadRequestError: if the handle (or name) is already taken
    """
    try:
        rows = run_sql(
            db,
            f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {COMPANY_FIELDS}""",
            [
                data["handle"],
                data["name"],
                data["description"],
                data.get("numEmployees"),
                data.get("logoUrl"),
            ],
        )
        db.commit()
    except IntegrityError:
        db.rollback()
        if run_sql(db, "SELECT handle FROM companies WHERE handle = $1", [data["handle"]]):
            raise BadRequestError(f"Duplicate company: {data['handle']}")
        raise BadRequestError(f"Duplicate company name: {data['name']}")

    logger.info(f"Company created: handle={data['handle']}")
    return rows[0]


def find_all_companies(
    db: Session,
    min_employees: Optional[int] = None,
    max_employees: Optional[int] = None,
    name_like: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    List companies ordered by name, optionally filtered.

    Filters left as None do not constrain the result.

    Raises:
        BadRequestError: if min_employees > max_employees
    """
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise BadRequestError("minEmployees cannot be greater than maxEmployees")

    where, values = sql_for_filters(
        "num_employees", "name", min_employees, max_employees, name_like
    )
    return run_sql(
        db,
        f"""SELECT {COMPANY_FIELDS}
            FROM companies
            WHERE {where}
            ORDER BY name""",
        values,
    )


def get_company(db: Session, handle: str) -> Dict[str, Any]:
    """
    Return a company with its jobs (ordered by id).

    Raises:
        NotFoundError: if there is no such company
    """
    rows = run_sql(
        db,
        f"SELECT {COMPANY_FIELDS} FROM companies WHERE handle = $1",
        [handle],
    )
    if not rows:
        raise NotFoundError(f"No company: {handle}")

    company = rows[0]
    company["jobs"] = run_sql(
        db,
        """SELECT id, title, salary, equity
           FROM jobs
           WHERE company_handle = $1
           ORDER BY id""",
        [handle],
    )
    return company


def update_company(db: Session, handle: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Partial update: only the fields present in ``data`` change.

    Raises:
        BadRequestError: if ``data`` is empty
        NotFoundError: if there is no such company
    """
    set_cols, values = sql_for_partial_update(data, COMPANY_COLUMNS)
    handle_idx = len(values) + 1

    try:
        rows = run_sql(
            db,
            f"""UPDATE companies
                SET {", ".join(set_cols)}
                WHERE handle = ${handle_idx}
                RETURNING {COMPANY_FIELDS}""",
            [*values, handle],
        )
    except IntegrityError:
        db.rollback()
        raise BadRequestError(f"Duplicate company name: {data.get('name')}")
    if not rows:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    db.commit()
    logger.info(f"Company updated: handle={handle}, fields={list(data.keys())}")
    return rows[0]


def remove_company(db: Session, handle: str) -> None:
    """
    Delete a company (its jobs cascade).

    Raises:
        NotFoundError: if there is no such company
    """
    rows = run_sql(db, "DELETE FROM companies WHERE handle = $1 RETURNING handle", [handle])
    if not rows:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    db.commit()
    logger.info(f"Company deleted: handle={handle}")
