"""
Profile service - read and save the user's profile.

Saving writes the whole profile (upsert); there is no partial update.
"""
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.exceptions import GatewayException
from jobportal.core.logging import get_logger
from jobportal.repositories.profile_repository import ProfileRepository
from jobportal.schemas.profile import ProfileResponse, ProfileUpdate

logger = get_logger(__name__)


class ProfileService:
    def __init__(self):
        self.profile_repo = ProfileRepository()

    async def get_profile(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> ProfileResponse:
        """The stored profile, or an empty default one if none was saved yet."""
        profile = await self.profile_repo.get(db, user_id)
        if profile is None:
            return ProfileResponse(id=user_id)
        return ProfileResponse.model_validate(profile)

    async def save_profile(
        self,
        db: AsyncSession,
        user_id: UUID,
        data: ProfileUpdate,
    ) -> ProfileResponse:
        """
        An existing admin keeps the admin role.

        Raises:
            GatewayException: If the upsert fails.
        """
        fields = data.model_dump()
        try:
            current = await self.profile_repo.get(db, user_id)
            if current is not None and current.role == "admin":
                fields["role"] = "admin"
            profile = await self.profile_repo.upsert(db, user_id, **fields)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("profile_update_failed", error=str(e))
            raise GatewayException("Failed to update profile")

        logger.info("profile_updated", role=profile.role)
        return ProfileResponse.model_validate(profile)
