"""
Saved job service - bookmarks, toggled between saved and not saved.

Every state reported back is read after the write has been committed.
"""
from typing import List
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.exceptions import GatewayException
from jobportal.core.logging import get_logger
from jobportal.core.session import SessionContext
from jobportal.models.saved_job import SavedJob
from jobportal.repositories.saved_job_repository import SavedJobRepository
from jobportal.schemas.job import JobSummary
from jobportal.schemas.saved_job import SavedJobListItem, SaveStateResponse
from jobportal.services.aggregates import time_ago
from jobportal.services.job_service import JobService

logger = get_logger(__name__)


class SavedJobService:
    """Saves, unsaves and lists bookmarked jobs."""

    def __init__(self):
        self.saved_repo = SavedJobRepository()
        self.job_service = JobService()

    async def is_saved(
        self,
        db: AsyncSession,
        user_id: UUID,
        job_id: UUID,
    ) -> bool:
        existing = await self.saved_repo.find_by_user_and_job(db, user_id, job_id)
        return existing is not None

    async def save(
        self,
        db: AsyncSession,
        session: SessionContext,
        job_id: UUID,
    ) -> SaveStateResponse:
        """
        Bookmark a job. Saving an already-saved job changes nothing.

        Raises:
            JobNotFoundException: If the job doesn't exist.
            GatewayException: If the insert fails.
        """
        await self.job_service.get_job(db, job_id)

        if await self.is_saved(db, session.user_id, job_id):
            return SaveStateResponse(job_id=job_id, saved=True, message="Job already saved")

        try:
            await self.saved_repo.create(db, user_id=session.user_id, job_id=job_id)
            await db.commit()
        except IntegrityError:
            # Lost a race with a concurrent save of the same pair
            await db.rollback()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("job_save_failed", job_id=str(job_id), error=str(e))
            raise GatewayException("Failed to save job")

        logger.info("job_saved", job_id=str(job_id))
        return SaveStateResponse(job_id=job_id, saved=True, message="Job saved successfully")

    async def unsave(
        self,
        db: AsyncSession,
        session: SessionContext,
        job_id: UUID,
    ) -> SaveStateResponse:
        """Remove the bookmark for (user, job). Unsaving twice is harmless."""
        try:
            removed = await self.saved_repo.delete_by_user_and_job(db, session.user_id, job_id)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("job_unsave_failed", job_id=str(job_id), error=str(e))
            raise GatewayException("Failed to remove saved job")

        logger.info("job_unsaved", job_id=str(job_id), removed=removed)
        return SaveStateResponse(
            job_id=job_id,
            saved=False,
            message="Job removed from saved jobs",
        )

    async def list_saved(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> List[SavedJobListItem]:
        try:
            saved = await self.saved_repo.find_for_user(db, user_id)
        except SQLAlchemyError as e:
            logger.error("saved_jobs_fetch_failed", error=str(e))
            return []
        return [self._to_list_item(s) for s in saved]

    async def count(self, db: AsyncSession, user_id: UUID) -> int:
        return await self.saved_repo.count_for_user(db, user_id)

    @staticmethod
    def _to_list_item(saved: SavedJob) -> SavedJobListItem:
        return SavedJobListItem(
            id=saved.id,
            job_id=saved.job_id,
            created_at=saved.created_at,
            job=JobSummary.model_validate(saved.job),
            saved_ago=time_ago(saved.created_at),
        )
