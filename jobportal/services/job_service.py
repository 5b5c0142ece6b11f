"""
Job service - business logic for job search, detail and posting.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.config import settings
from jobportal.core.events import event_bus
from jobportal.core.exceptions import (
    ForbiddenException,
    GatewayException,
    JobNotFoundException,
)
from jobportal.core.logging import get_logger
from jobportal.core.session import SessionContext
from jobportal.models.job import Job, JOB_CATEGORIES, JOB_TYPES, EXPERIENCE_LEVELS
from jobportal.repositories.job_repository import JobRepository
from jobportal.schemas.job import (
    HomeResponse,
    JobCreate,
    JobDetail,
    JobFilters,
    JobListItem,
    JobListResponse,
    JobOptions,
)
from jobportal.services.aggregates import extract_categories, filter_jobs, time_ago

logger = get_logger(__name__)


class JobService:
    """Handles job search, detail retrieval and posting."""

    def __init__(self):
        self.job_repo = JobRepository()

    async def search(
        self,
        db: AsyncSession,
        filters: JobFilters,
        *,
        limit: Optional[int] = None,
    ) -> List[Job]:
        """
        Run the filtered listing query.

        A gateway failure is logged and reported as no results; the
        listing view stays usable and nothing is retried.
        """
        try:
            return await self.job_repo.find_with_filters(
                db,
                search=filters.search,
                location=filters.location,
                category=filters.category,
                job_type=filters.job_type,
                experience_level=filters.experience_level,
                company=filters.company,
                limit=limit,
            )
        except SQLAlchemyError as e:
            logger.error(
                "job_search_failed",
                error=str(e),
                filters=filters.model_dump(exclude_none=True),
            )
            return []

    async def list_jobs(
        self,
        db: AsyncSession,
        filters: JobFilters,
        *,
        refine: Optional[str] = None,
    ) -> JobListResponse:
        """
        Listing page: filtered jobs plus the categories present in them.

        ``refine`` narrows the fetched page in memory instead of re-querying.
        """
        jobs = await self.search(db, filters)
        jobs = filter_jobs(jobs, refine)
        return JobListResponse(
            items=[self.to_list_item(job) for job in jobs],
            total=len(jobs),
            categories=extract_categories(jobs),
        )

    async def home(
        self,
        db: AsyncSession,
        *,
        search: Optional[str] = None,
        location: Optional[str] = None,
    ) -> HomeResponse:
        """
        Landing page: the latest jobs, or every match when the hero search is used.
        """
        if search or location:
            jobs = await self.search(db, JobFilters(search=search, location=location))
        else:
            jobs = await self.search(db, JobFilters(), limit=settings.home_latest_jobs)

        return HomeResponse(
            jobs=[self.to_list_item(job) for job in jobs],
            categories=extract_categories(jobs),
        )

    async def latest(
        self,
        db: AsyncSession,
        limit: int,
    ) -> List[JobListItem]:
        jobs = await self.search(db, JobFilters(), limit=limit)
        return [self.to_list_item(job) for job in jobs]

    async def get_job(
        self,
        db: AsyncSession,
        job_id: UUID,
    ) -> Job:
        """
        Raises:
            JobNotFoundException: If job doesn't exist.
        """
        job = await self.job_repo.get_by_id(db, job_id)
        if not job:
            raise JobNotFoundException()
        return job

    async def get_job_detail(
        self,
        db: AsyncSession,
        job_id: UUID,
    ) -> JobDetail:
        job = await self.get_job(db, job_id)
        return self.to_detail(job)

    async def post_job(
        self,
        db: AsyncSession,
        session: SessionContext,
        data: JobCreate,
    ) -> JobDetail:
        """
        Publish a new listing on behalf of an employer.

        Raises:
            ForbiddenException: If the poster's profile role cannot post jobs.
            GatewayException: If the insert fails.
        """
        if not session.can_post_jobs:
            raise ForbiddenException("Only employers can post jobs")

        try:
            job = await self.job_repo.create(
                db,
                **data.model_dump(),
                posted_by=session.user_id,
            )
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("job_post_failed", error=str(e))
            raise GatewayException("Failed to post job")

        logger.info("job_posted", job_id=str(job.id), company=job.company)
        detail = self.to_detail(job)
        event_bus.publish_insert("jobs", detail.model_dump(mode="json"))
        return detail

    @staticmethod
    def options() -> JobOptions:
        return JobOptions(
            categories=list(JOB_CATEGORIES),
            job_types=list(JOB_TYPES),
            experience_levels=list(EXPERIENCE_LEVELS),
        )

    @staticmethod
    def to_list_item(job: Job) -> JobListItem:
        """Convert a Job model to a JobListItem response."""
        return JobListItem(
            id=job.id,
            title=job.title,
            company=job.company,
            location=job.location,
            category=job.category,
            job_type=job.job_type,
            experience_level=job.experience_level,
            salary_range=job.salary_range,
            description=job.description,
            created_at=job.created_at,
            posted_ago=time_ago(job.created_at),
        )

    @classmethod
    def to_detail(cls, job: Job) -> JobDetail:
        return JobDetail(
            **cls.to_list_item(job).model_dump(),
            requirements=job.requirements,
            posted_by=job.posted_by,
        )
