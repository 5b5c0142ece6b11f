"""
Profile repository - data access for UserProfile entity.
"""
from typing import Any, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.models.user_profile import UserProfile
from jobportal.repositories.base import BaseRepository


class ProfileRepository(BaseRepository[UserProfile]):
    def __init__(self):
        super().__init__(UserProfile)

    async def get(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> Optional[UserProfile]:
        return await db.get(UserProfile, user_id)

    async def upsert(
        self,
        db: AsyncSession,
        user_id: UUID,
        **fields: Any,
    ) -> UserProfile:
        """Write the whole profile row, creating it on first save."""
        profile = await self.get(db, user_id)
        if profile is None:
            return await self.create(db, id=user_id, **fields)
        return await self.update(db, profile, **fields)
