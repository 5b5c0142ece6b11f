"""
Dashboard service - the signed-in user's overview.
"""
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.config import settings
from jobportal.core.logging import get_logger
from jobportal.schemas.dashboard import DashboardResponse, DashboardStats
from jobportal.schemas.profile import ProfileResponse
from jobportal.services.application_service import ApplicationService
from jobportal.services.job_service import JobService
from jobportal.services.notification_service import NotificationService
from jobportal.services.profile_service import ProfileService
from jobportal.services.saved_job_service import SavedJobService

logger = get_logger(__name__)


class DashboardService:
    """Aggregates profile, activity counts and recent jobs."""

    def __init__(self):
        self.profile_service = ProfileService()
        self.application_service = ApplicationService()
        self.saved_job_service = SavedJobService()
        self.notification_service = NotificationService()
        self.job_service = JobService()

    async def get_dashboard(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> DashboardResponse:
        profile = await self._profile(db, user_id)
        stats = await self._stats(db, user_id)
        recent_jobs = await self.job_service.latest(db, settings.dashboard_latest_jobs)

        return DashboardResponse(
            profile=profile,
            stats=stats,
            recent_jobs=recent_jobs,
        )

    async def _profile(self, db: AsyncSession, user_id: UUID) -> ProfileResponse:
        try:
            return await self.profile_service.get_profile(db, user_id)
        except SQLAlchemyError as e:
            logger.error("dashboard_profile_failed", error=str(e))
            return ProfileResponse(id=user_id)

    async def _stats(self, db: AsyncSession, user_id: UUID) -> DashboardStats:
        """Counts degrade to zero when the gateway fails."""
        try:
            return DashboardStats(
                applications=await self.application_service.count(db, user_id),
                saved_jobs=await self.saved_job_service.count(db, user_id),
                unread_notifications=await self.notification_service.count_unread(db, user_id),
            )
        except SQLAlchemyError as e:
            logger.error("dashboard_stats_failed", error=str(e))
            return DashboardStats(applications=0, saved_jobs=0, unread_notifications=0)
