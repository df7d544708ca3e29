"""
User endpoints.

Creating and listing users is admin-only; everything under
/users/{username} is open to that user or an admin.
"""
import logging

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from jobly.core.auth_dependency import get_db, ensure_admin, ensure_correct_user_or_admin
from jobly.core.security import create_access_token
from jobly.schemas.job import AppliedResponse, MAX_JOB_ID
from jobly.schemas.user import (
    UserCreate,
    UserUpdate,
    UserEnvelope,
    UserDetailEnvelope,
    UserCreatedResponse,
    UserListResponse,
)
from jobly.services import application_service, user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserCreatedResponse,
    dependencies=[Depends(ensure_admin)],
)
def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    """
    Admin-only registration; unlike /auth/register this can create admins.

    Returns the new user and a token for them.
    """
    user = user_service.register(db, user_data.model_dump(by_alias=True))
    token = create_access_token(user["username"], bool(user["is_admin"]))
    return {"user": user, "token": token}


@router.get("", response_model=UserListResponse, dependencies=[Depends(ensure_admin)])
def list_users(db: Session = Depends(get_db)):
    return {"users": user_service.find_all_users(db)}


@router.get(
    "/{username}",
    response_model=UserDetailEnvelope,
    dependencies=[Depends(ensure_correct_user_or_admin)],
)
def get_user(username: str, db: Session = Depends(get_db)):
    """User details plus the ids of jobs applied to."""
    return {"user": user_service.get_user(db, username)}


@router.patch(
    "/{username}",
    response_model=UserEnvelope,
    dependencies=[Depends(ensure_correct_user_or_admin)],
)
def update_user(username: str, user_data: UserUpdate, db: Session = Depends(get_db)):
    """Partial profile update; may set a new password."""
    return {"user": user_service.update_user(db, username, user_data.changed_fields())}


@router.delete("/{username}", dependencies=[Depends(ensure_correct_user_or_admin)])
def delete_user(username: str, db: Session = Depends(get_db)):
    user_service.remove_user(db, username)
    return {"deleted": username}


@router.post(
    "/{username}/jobs/{job_id}",
    response_model=AppliedResponse,
    dependencies=[Depends(ensure_correct_user_or_admin)],
)
def apply_for_job(
    username: str,
    job_id: int = Path(..., ge=1, le=MAX_JOB_ID),
    db: Session = Depends(get_db),
):
    """Apply ``username`` to a job; an admin may apply on a user's behalf."""
    application_service.apply(db, username, job_id)
    return {"applied": job_id}
