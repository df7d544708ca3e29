"""
Pydantic schemas for job endpoints.
"""
from typing import Optional
from pydantic import Field, field_validator

from jobly.schemas.common import CamelModel, RequestModel

# Largest value a PostgreSQL SERIAL id can hold
MAX_JOB_ID = 2**31 - 1


class JobCreate(RequestModel):
    """Schema for creating a job posting."""
    title: str = Field(..., min_length=1, description="Job title")
    salary: Optional[int] = Field(None, ge=0, description="Yearly salary")
    equity: Optional[float] = Field(None, ge=0, le=1, description="Equity fraction in [0, 1]")
    company_handle: str = Field(..., min_length=1, max_length=25, description="Owning company")


class JobUpdate(RequestModel):
    """Schema for a partial job update. Id and company are immutable."""
    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class JobSummary(CamelModel):
    """Job as listed under its company."""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None


class JobResponse(JobSummary):
    company_handle: str


class JobEnvelope(CamelModel):
    job: JobResponse


class JobListResponse(CamelModel):
    jobs: list[JobResponse]


class AppliedResponse(CamelModel):
    applied: int
