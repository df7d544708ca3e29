"""
Job posting data access.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.core.errors import BadRequestError, NotFoundError
from jobly.db.query import run_sql
from jobly.db.sql import sql_for_partial_update, sql_for_filters

logger = logging.getLogger(__name__)

JOB_COLUMNS = {
    "companyHandle": "company_handle",
}

JOB_FIELDS = "id, title, salary, equity, company_handle"


def create_job(db: Session, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Insert a job for an existing company.

    Raises:
        BadRequestError: if the company does not exist
    """
    company = run_sql(
        db, "SELECT handle FROM companies WHERE handle = $1", [data["companyHandle"]]
    )
    if not company:
        raise BadRequestError(f"No company: {data['companyHandle']}")

    try:
        rows = run_sql(
            db,
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_FIELDS}""",
            [data["title"], data.get("salary"), data.get("equity"), data["companyHandle"]],
        )
        db.commit()
    except IntegrityError:
        # company removed between the check and the insert
        db.rollback()
        raise BadRequestError(f"No company: {data['companyHandle']}")

    job = rows[0]
    logger.info(f"Job created: job_id={job['id']}, company={job['company_handle']}")
    return job


def find_all_jobs(
    db: Session,
    title: Optional[str] = None,
    min_salary: Optional[int] = None,
    max_salary: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    List jobs ordered by title, optionally filtered by salary range and a
    case-insensitive title substring.

    Raises:
        BadRequestError: if min_salary > max_salary
    """
    if min_salary is not None and max_salary is not None and min_salary > max_salary:
        raise BadRequestError("minSalary cannot be greater than maxSalary")

    where, values = sql_for_filters("salary", "title", min_salary, max_salary, title)
    return run_sql(
        db,
        f"""SELECT {JOB_FIELDS}
            FROM jobs
            WHERE {where}
            ORDER BY title, id""",
        values,
    )


def get_job(db: Session, job_id: int) -> Dict[str, Any]:
    """
    Raises:
        NotFoundError: if there is no such job
    """
    rows = run_sql(db, f"SELECT {JOB_FIELDS} FROM jobs WHERE id = $1", [job_id])
    if not rows:
        raise NotFoundError(f"No job: {job_id}")
    return rows[0]


def update_job(db: Session, job_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Partial update of title, salary and equity.

    Raises:
        BadRequestError: if ``data`` is empty
        NotFoundError: if there is no such job
    """
    set_cols, values = sql_for_partial_update(data, JOB_COLUMNS)
    id_idx = len(values) + 1

    rows = run_sql(
        db,
        f"""UPDATE jobs
            SET {", ".join(set_cols)}
            WHERE id = ${id_idx}
            RETURNING {JOB_FIELDS}""",
        [*values, job_id],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    logger.info(f"Job updated: job_id={job_id}, fields={list(data.keys())}")
    return rows[0]


def remove_job(db: Session, job_id: int) -> None:
    """
    Delete a job (its applications cascade).

    Raises:
        NotFoundError: if there is no such job
    """
    rows = run_sql(db, "DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id])
    if not rows:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    logger.info(f"Job deleted: job_id={job_id}")
