"""
User data access and authentication.

Password hashes are stored in ``users.password`` and are never returned.
"""
import logging
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.core.errors import BadRequestError, NotFoundError, UnauthorizedError
from jobly.core.logging_config import sanitize_log_data
from jobly.core.security import hash_password, verify_password
from jobly.db.query import run_sql
from jobly.db.sql import sql_for_partial_update
from jobly.services.application_service import get_job_ids_for_user

logger = logging.getLogger(__name__)

USER_COLUMNS = {
    "firstName": "first_name",
    "lastName": "last_name",
}

USER_FIELDS = "username, first_name, last_name, email, is_admin"


def authenticate(db: Session, username: str, password: str) -> Dict[str, Any]:
    """
    Check a username/password pair.

    Raises:
        UnauthorizedError: if the user is missing or the password is wrong
    """
    rows = run_sql(
        db,
        f"SELECT {USER_FIELDS}, password FROM users WHERE username = $1",
        [username],
    )
    if rows:
        user = rows[0]
        hashed = user.pop("password")
        if verify_password(password, hashed):
            return user

    logger.warning(f"Failed login attempt: username={username}")
    raise UnauthorizedError("Invalid username/password")


def register(db: Session, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Insert a user, hashing the password.

    Raises:
        BadRequestError: on duplicate username
    """
    try:
        rows = run_sql(
            db,
            f"""INSERT INTO users (username, password, first_name, last_name, email, is_admin)
                VALUES ($1, $2, $3, $4, $5, $6)
                RETURNING {USER_FIELDS}""",
            [
                data["username"],
                hash_password(data["password"]),
                data["firstName"],
                data["lastName"],
                data["email"],
                bool(data.get("isAdmin", False)),
            ],
        )
        db.commit()
    except IntegrityError:
        db.rollback()
        raise BadRequestError(f"Duplicate username: {data['username']}")

    logger.info(f"User registered: username={data['username']}, is_admin={rows[0]['is_admin']}")
    return rows[0]


def find_all_users(db: Session) -> List[Dict[str, Any]]:
    return run_sql(db, f"SELECT {USER_FIELDS} FROM users ORDER BY username")


def get_user(db: Session, username: str) -> Dict[str, Any]:
    """
    Return a user with the ids of the jobs they applied to.

    Raises:
        NotFoundError: if there is no such user
    """
    rows = run_sql(db, f"SELECT {USER_FIELDS} FROM users WHERE username = $1", [username])
    if not rows:
        raise NotFoundError(f"No user: {username}")

    user = rows[0]
    user["jobs"] = get_job_ids_for_user(db, username)
    return user


def update_user(db: Session, username: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Partial update of profile fields; a new password is hashed first.

    Callers must have validated ``data``: this can set a new password.

    Raises:
        BadRequestError: if ``data`` is empty
        NotFoundError: if there is no such user
    """
    data = dict(data)
    if data.get("password"):
        data["password"] = hash_password(data["password"])

    set_cols, values = sql_for_partial_update(data, USER_COLUMNS)
    username_idx = len(values) + 1

    rows = run_sql(
        db,
        f"""UPDATE users
            SET {", ".join(set_cols)}
            WHERE username = ${username_idx}
            RETURNING {USER_FIELDS}""",
        [*values, username],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No user: {username}")

    db.commit()
    logger.info(f"User updated: username={username}, fields={sorted(data.keys())}")
    logger.debug(f"User update values: {sanitize_log_data(data)}")
    return rows[0]


def remove_user(db: Session, username: str) -> None:
    """
    Delete a user (their applications cascade).

    Raises:
        NotFoundError: if there is no such user
    """
    rows = run_sql(db, "DELETE FROM users WHERE username = $1 RETURNING username", [username])
    if not rows:
        db.rollback()
        raise NotFoundError(f"No user: {username}")

    db.commit()
    logger.info(f"User deleted: username={username}")
