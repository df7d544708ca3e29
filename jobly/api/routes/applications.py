"""
Job application endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobly.core.auth_dependency import (
    get_db,
    ensure_logged_in,
    ensure_correct_user_or_admin,
    is_self_or_admin,
)
from jobly.core.errors import ForbiddenError
from jobly.core.security import TokenPayload
from jobly.schemas.application import (
    ApplicationCreate,
    ApplicationEnvelope,
    AppliedJobListResponse,
)
from jobly.services import application_service

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ApplicationEnvelope)
def create_application(
    application_data: ApplicationCreate,
    credential: TokenPayload = Depends(ensure_logged_in),
    db: Session = Depends(get_db),
):
    """
    Record an application for ``username`` to ``jobId``.

    Repeating the request returns the existing application.
    """
    if not is_self_or_admin(credential, application_data.username):
        raise ForbiddenError()

    application = application_service.apply(db, application_data.username, application_data.job_id)
    return {"application": application}


@router.get(
    "/{username}",
    response_model=AppliedJobListResponse,
    dependencies=[Depends(ensure_correct_user_or_admin)],
)
def list_applications(username: str, db: Session = Depends(get_db)):
    """Jobs the user applied to, with company name, ordered by job id."""
    return {"applications": application_service.get_all_for_user(db, username)}
