"""
Pydantic schemas for job application endpoints.
"""
from datetime import datetime
from pydantic import Field

from jobly.schemas.common import CamelModel, RequestModel
from jobly.schemas.job import MAX_JOB_ID


class ApplicationCreate(RequestModel):
    username: str = Field(..., min_length=1, max_length=25)
    job_id: int = Field(..., ge=1, le=MAX_JOB_ID)


class ApplicationResponse(CamelModel):
    username: str
    job_id: int
    applied_at: datetime


class ApplicationEnvelope(CamelModel):
    application: ApplicationResponse


class AppliedJob(CamelModel):
    """A job the user applied to, joined with its company."""
    id: int
    title: str
    company_handle: str
    company_name: str
    applied_at: datetime


class AppliedJobListResponse(CamelModel):
    applications: list[AppliedJob]
