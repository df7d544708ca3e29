"""
Job posting endpoints.

Reads are public; mutations require an admin; applying requires any
logged-in user.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from jobly.core.auth_dependency import get_db, ensure_admin, ensure_logged_in
from jobly.core.security import TokenPayload
from jobly.schemas.job import (
    JobCreate,
    JobUpdate,
    JobEnvelope,
    JobListResponse,
    AppliedResponse,
    MAX_JOB_ID,
)
from jobly.services import application_service, job_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=JobEnvelope,
    dependencies=[Depends(ensure_admin)],
)
def create_job(job_data: JobCreate, db: Session = Depends(get_db)):
    """Create a job for an existing company. Authorization required: admin."""
    return {"job": job_service.create_job(db, job_data.model_dump(by_alias=True))}


@router.get("", response_model=JobListResponse)
def list_jobs(
    title: Optional[str] = Query(None, description="Case-insensitive title substring"),
    min_salary: Optional[int] = Query(None, alias="minSalary"),
    max_salary: Optional[int] = Query(None, alias="maxSalary"),
    db: Session = Depends(get_db),
):
    return {"jobs": job_service.find_all_jobs(db, title, min_salary, max_salary)}


@router.post("/apply/{job_id}", response_model=AppliedResponse)
def apply_for_job(
    job_id: int = Path(..., ge=1, le=MAX_JOB_ID),
    credential: TokenPayload = Depends(ensure_logged_in),
    db: Session = Depends(get_db),
):
    """
    Apply the logged-in user to a job.

    Applying twice succeeds both times. A missing job is a 404.
    """
    application_service.apply(db, credential.username, job_id)
    return {"applied": job_id}


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(job_id: int = Path(..., ge=1, le=MAX_JOB_ID), db: Session = Depends(get_db)):
    return {"job": job_service.get_job(db, job_id)}


@router.patch(
    "/{job_id}",
    response_model=JobEnvelope,
    dependencies=[Depends(ensure_admin)],
)
def update_job(
    job_data: JobUpdate,
    job_id: int = Path(..., ge=1, le=MAX_JOB_ID),
    db: Session = Depends(get_db),
):
    """Partial update of title, salary, equity. Authorization required: admin."""
    return {"job": job_service.update_job(db, job_id, job_data.changed_fields())}


@router.delete("/{job_id}", dependencies=[Depends(ensure_admin)])
def delete_job(job_id: int = Path(..., ge=1, le=MAX_JOB_ID), db: Session = Depends(get_db)):
    """Authorization required: admin"""
    job_service.remove_job(db, job_id)
    return {"deleted": job_id}
