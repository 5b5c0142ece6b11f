"""
Job routes.

Thin controllers - listing, detail, posting, and the per-job apply/save
actions of the detail page.
"""
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.api.deps import get_session
from jobportal.core.database import get_db
from jobportal.core.rate_limit import limiter, RATE_WRITE
from jobportal.core.session import SessionContext
from jobportal.schemas.application import ApplicationCreate, ApplicationResponse
from jobportal.schemas.job import (
    JobCreate,
    JobDetail,
    JobFilters,
    JobListResponse,
    JobOptions,
    JobUserState,
)
from jobportal.schemas.saved_job import SaveStateResponse
from jobportal.services.application_service import ApplicationService
from jobportal.services.job_service import JobService
from jobportal.services.saved_job_service import SavedJobService

router = APIRouter(prefix="/jobs", tags=["jobs"])

job_service = JobService()
application_service = ApplicationService()
saved_job_service = SavedJobService()


@router.get("", response_model=JobListResponse)
async def list_jobs(
    search: Optional[str] = Query(None, description="Title, description or company"),
    location: Optional[str] = Query(None, description="Location substring"),
    category: Optional[str] = Query(None),
    job_type: Optional[str] = Query(None),
    experience_level: Optional[str] = Query(None),
    company: Optional[str] = Query(None, description="Exact company name"),
    refine: Optional[str] = Query(None, description="Narrow the results in memory"),
    db: AsyncSession = Depends(get_db),
):
    """List jobs matching every given filter, newest first."""
    filters = JobFilters(
        search=search,
        location=location,
        category=category,
        job_type=job_type,
        experience_level=experience_level,
        company=company,
    )
    return await job_service.list_jobs(db, filters, refine=refine)


@router.get("/options", response_model=JobOptions)
async def job_options():
    """Categories, job types and experience levels offered by the filters."""
    return job_service.options()


@router.post("", response_model=JobDetail, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_WRITE)
async def post_job(
    request: Request,
    body: JobCreate,
    session: SessionContext = Depends(get_session),
    db: AsyncSession = Depends(get_db),
):
    """Post a new job. Employers only."""
    return await job_service.post_job(db, session, body)


@router.get("/{job_id}", response_model=JobDetail)
async def get_job(
    job_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get job details by ID."""
    return await job_service.get_job_detail(db, job_id)


@router.get("/{job_id}/status", response_model=JobUserState)
async def get_job_status(
    job_id: UUID,
    session: SessionContext = Depends(get_session),
    db: AsyncSession = Depends(get_db),
):
    """Whether the current user has applied to or saved this job."""
    await job_service.get_job(db, job_id)
    return JobUserState(
        job_id=job_id,
        applied=await application_service.has_applied(db, session.user_id, job_id),
        saved=await saved_job_service.is_saved(db, session.user_id, job_id),
    )


@router.post(
    "/{job_id}/apply",
    response_model=ApplicationResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(RATE_WRITE)
async def apply_to_job(
    request: Request,
    job_id: UUID,
    body: Optional[ApplicationCreate] = None,
    session: SessionContext = Depends(get_session),
    db: AsyncSession = Depends(get_db),
):
    """Submit an application. A cover letter is optional."""
    return await application_service.apply(
        db,
        session,
        job_id,
        cover_letter=body.cover_letter if body else None,
    )


@router.put("/{job_id}/save", response_model=SaveStateResponse)
@limiter.limit(RATE_WRITE)
async def save_job(
    request: Request,
    job_id: UUID,
    session: SessionContext = Depends(get_session),
    db: AsyncSession = Depends(get_db),
):
    """Bookmark a job."""
    return await saved_job_service.save(db, session, job_id)


@router.delete("/{job_id}/save", response_model=SaveStateResponse)
@limiter.limit(RATE_WRITE)
async def unsave_job(
    request: Request,
    job_id: UUID,
    session: SessionContext = Depends(get_session),
    db: AsyncSession = Depends(get_db),
):
    """Remove a bookmark."""
    return await saved_job_service.unsave(db, session, job_id)
