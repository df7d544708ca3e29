"""
Pydantic schemas for company endpoints.
"""
from typing import Optional
from pydantic import Field, field_validator

from jobly.schemas.common import CamelModel, RequestModel
from jobly.schemas.job import JobSummary


class CompanyCreate(RequestModel):
    """Schema for creating a company."""
    handle: str = Field(..., min_length=1, max_length=25, description="Unique, immutable key")
    name: str = Field(..., min_length=1, description="Company name")
    description: str = Field(..., description="Company description")
    num_employees: Optional[int] = Field(None, ge=0, description="Number of employees")
    logo_url: Optional[str] = Field(None, description="Logo URL")

    model_config = {
        "json_schema_extra": {
            "example": {
                "handle": "acme",
                "name": "Acme Corp",
                "description": "Anvils and rockets",
                "numEmployees": 120,
                "logoUrl": "https://acme.example.com/logo.png"
            }
        }
    }


class CompanyUpdate(RequestModel):
    """Schema for a partial company update. The handle cannot change."""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None

    @field_validator("name", "description")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class CompanyResponse(CamelModel):
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyDetail(CompanyResponse):
    """Company with the jobs it owns."""
    jobs: list[JobSummary] = Field(default_factory=list)


class CompanyEnvelope(CamelModel):
    company: CompanyResponse


class CompanyDetailEnvelope(CamelModel):
    company: CompanyDetail


class CompanyListResponse(CamelModel):
    companies: list[CompanyResponse]
