"""
Home page route.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.database import get_db
from jobportal.schemas.job import HomeResponse
from jobportal.services.job_service import JobService

router = APIRouter(tags=["home"])

job_service = JobService()


@router.get("/home", response_model=HomeResponse)
async def home(
    search: Optional[str] = Query(None, description="Job title, keywords, or company"),
    location: Optional[str] = Query(None, description="Location substring"),
    db: AsyncSession = Depends(get_db),
):
    """Latest jobs for the landing page, or hero-search results."""
    return await job_service.home(db, search=search, location=location)
