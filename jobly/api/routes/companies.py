"""
Company endpoints.

Reads are public; every mutation requires an admin credential.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from jobly.core.auth_dependency import get_db, ensure_admin
from jobly.schemas.company import (
    CompanyCreate,
    CompanyUpdate,
    CompanyEnvelope,
    CompanyDetailEnvelope,
    CompanyListResponse,
)
from jobly.services import company_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CompanyEnvelope,
    dependencies=[Depends(ensure_admin)],
)
def create_company(company_data: CompanyCreate, db: Session = Depends(get_db)):
    """Create a company. Authorization required: admin."""
    company = company_service.create_company(db, company_data.model_dump(by_alias=True))
    return {"company": company}


@router.get("", response_model=CompanyListResponse)
def list_companies(
    min_employees: Optional[int] = Query(None, alias="minEmployees", description="Inclusive lower bound"),
    max_employees: Optional[int] = Query(None, alias="maxEmployees", description="Inclusive upper bound"),
    name_like: Optional[str] = Query(None, alias="nameLike", description="Case-insensitive name substring"),
    db: Session = Depends(get_db),
):
    """List companies, optionally filtered by size range and name."""
    companies = company_service.find_all_companies(db, min_employees, max_employees, name_like)
    return {"companies": companies}


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
def get_company(handle: str, db: Session = Depends(get_db)):
    """Company details plus its jobs."""
    return {"company": company_service.get_company(db, handle)}


@router.patch(
    "/{handle}",
    response_model=CompanyEnvelope,
    dependencies=[Depends(ensure_admin)],
)
def update_company(handle: str, company_data: CompanyUpdate, db: Session = Depends(get_db)):
    """
    Partial update: fields missing from the body keep their values.

    Authorization required: admin
    """
    company = company_service.update_company(db, handle, company_data.changed_fields())
    return {"company": company}


@router.delete("/{handle}", dependencies=[Depends(ensure_admin)])
def delete_company(handle: str, db: Session = Depends(get_db)):
    """Authorization required: admin"""
    company_service.remove_company(db, handle)
    return {"deleted": handle}
