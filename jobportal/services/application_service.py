"""
Application service - the not-applied -> applied transition.

There is no way back: withdrawing an application is not supported.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.exceptions import AlreadyAppliedException, GatewayException
from jobportal.core.logging import get_logger
from jobportal.core.session import SessionContext
from jobportal.models.application import Application
from jobportal.repositories.application_repository import ApplicationRepository
from jobportal.schemas.application import ApplicationListItem, ApplicationResponse
from jobportal.schemas.job import JobSummary
from jobportal.services.aggregates import time_ago
from jobportal.services.job_service import JobService
from jobportal.services.notification_service import NotificationService

logger = get_logger(__name__)


class ApplicationService:
    """Submits and lists job applications."""

    def __init__(self):
        self.application_repo = ApplicationRepository()
        self.job_service = JobService()
        self.notification_service = NotificationService()

    async def has_applied(
        self,
        db: AsyncSession,
        user_id: UUID,
        job_id: UUID,
    ) -> bool:
        existing = await self.application_repo.find_by_user_and_job(db, user_id, job_id)
        return existing is not None

    async def apply(
        self,
        db: AsyncSession,
        session: SessionContext,
        job_id: UUID,
        *,
        cover_letter: Optional[str] = None,
    ) -> ApplicationResponse:
        """
        Submit an application with status 'pending'.

        The applicant also gets an "Application submitted" notification,
        written in the same transaction.

        Raises:
            JobNotFoundException: If the job doesn't exist.
            AlreadyAppliedException: If the user already applied (checked
                first, and again by the unique constraint on insert).
            GatewayException: If the insert fails for any other reason.
        """
        job = await self.job_service.get_job(db, job_id)

        if await self.has_applied(db, session.user_id, job_id):
            raise AlreadyAppliedException()

        try:
            application = await self.application_repo.create(
                db,
                user_id=session.user_id,
                job_id=job.id,
                cover_letter=cover_letter or None,
                status="pending",
            )
            notification = await self.notification_service.create(
                db,
                session.user_id,
                f"Your application for {job.title} at {job.company} has been received.",
                title="Application submitted",
                commit=False,
            )
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise AlreadyAppliedException()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("application_submit_failed", job_id=str(job_id), error=str(e))
            raise GatewayException("Failed to submit application")

        self.notification_service.announce(notification)
        logger.info(
            "application_submitted",
            application_id=str(application.id),
            job_id=str(job_id),
        )
        return ApplicationResponse.model_validate(application)

    async def list_applications(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> List[ApplicationListItem]:
        """The user's applications with job summaries, newest first."""
        try:
            applications = await self.application_repo.find_for_user(db, user_id)
        except SQLAlchemyError as e:
            logger.error("application_fetch_failed", error=str(e))
            return []
        return [self._to_list_item(a) for a in applications]

    async def count(self, db: AsyncSession, user_id: UUID) -> int:
        return await self.application_repo.count_for_user(db, user_id)

    @staticmethod
    def _to_list_item(application: Application) -> ApplicationListItem:
        return ApplicationListItem(
            id=application.id,
            job_id=application.job_id,
            cover_letter=application.cover_letter,
            status=application.status,
            created_at=application.created_at,
            job=JobSummary.model_validate(application.job),
            applied_ago=time_ago(application.created_at),
        )
