"""
Company directory routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.database import get_db
from jobportal.schemas.company import CompanyResponse
from jobportal.services.company_service import CompanyService

router = APIRouter(prefix="/companies", tags=["companies"])

company_service = CompanyService()


@router.get("", response_model=List[CompanyResponse])
async def list_companies(
    search: Optional[str] = Query(None, description="Company name or location"),
    db: AsyncSession = Depends(get_db),
):
    """
    Companies that are hiring, with open position counts and locations.

    Use GET /jobs?company=<name> to list a company's jobs.
    """
    return await company_service.list_companies(db, search=search)
