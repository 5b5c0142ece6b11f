"""
User repository - data access for User entity.

Emails are stored lower-cased and looked up the same way.
"""
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jobportal.models.user import User
from jobportal.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self):
        super().__init__(User)

    @staticmethod
    def _active_with_profile():
        return (
            select(User)
            .options(selectinload(User.profile))
            .where(User.is_active == True)  # noqa: E712
        )

    async def get_active_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        result = await db.execute(self._active_with_profile().where(User.email == email.lower()))
        return result.scalar_one_or_none()

    async def get_active_by_id(self, db: AsyncSession, user_id: UUID) -> Optional[User]:
        """The session's user; None once deactivated."""
        result = await db.execute(self._active_with_profile().where(User.id == user_id))
        return result.scalar_one_or_none()

    async def email_exists(self, db: AsyncSession, email: str) -> bool:
        result = await db.execute(select(User.id).where(User.email == email.lower()))
        return result.scalar_one_or_none() is not None
