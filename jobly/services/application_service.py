"""
Job application registry.

A (username, job_id) pair moves from absent to applied exactly once. The
insert uses ON CONFLICT DO NOTHING against the pair's primary key, so
concurrent applies from several processes still leave a single row and both
callers see success.
"""
import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from jobly.core.errors import NotFoundError
from jobly.db.query import run_sql

logger = logging.getLogger(__name__)

APPLICATION_FIELDS = "username, job_id, applied_at"


def _ensure_job_exists(db: Session, job_id: int) -> None:
    if not run_sql(db, "SELECT id FROM jobs WHERE id = $1", [job_id]):
        raise NotFoundError(f"No job: {job_id}")


def _ensure_user_exists(db: Session, username: str) -> None:
    if not run_sql(db, "SELECT username FROM users WHERE username = $1", [username]):
        raise NotFoundError(f"No user: {username}")


def apply(db: Session, username: str, job_id: int) -> Dict[str, Any]:
    """
    Record that ``username`` applied to ``job_id``.

    Applying again is a no-op that returns the existing application.

    Returns:
        {username, job_id, applied_at}

    Raises:
        NotFoundError: if the job or the user does not exist
    """
    _ensure_job_exists(db, job_id)
    _ensure_user_exists(db, username)

    run_sql(
        db,
        """INSERT INTO applications (username, job_id)
           VALUES ($1, $2)
           ON CONFLICT (username, job_id) DO NOTHING""",
        [username, job_id],
    )
    rows = run_sql(
        db,
        f"""SELECT {APPLICATION_FIELDS}
            FROM applications
            WHERE username = $1 AND job_id = $2""",
        [username, job_id],
    )
    db.commit()

    logger.info(f"Application recorded: username={username}, job_id={job_id}")
    return rows[0]


def get_all_for_user(db: Session, username: str) -> List[Dict[str, Any]]:
    """
    Jobs ``username`` applied to, joined with their company, by job id.

    Returns:
        [{id, title, company_handle, company_name, applied_at}, ...]

    Raises:
        NotFoundError: if the user does not exist
    """
    _ensure_user_exists(db, username)

    return run_sql(
        db,
        """SELECT j.id,
                  j.title,
                  j.company_handle,
                  c.name AS company_name,
                  a.applied_at
           FROM applications AS a
                JOIN jobs AS j ON a.job_id = j.id
                JOIN companies AS c ON j.company_handle = c.handle
           WHERE a.username = $1
           ORDER BY j.id""",
        [username],
    )


def get_job_ids_for_user(db: Session, username: str) -> List[int]:
    rows = run_sql(
        db,
        "SELECT job_id FROM applications WHERE username = $1 ORDER BY job_id",
        [username],
    )
    return [row["job_id"] for row in rows]
