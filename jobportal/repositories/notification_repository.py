"""
Notification repository - data access for Notification entity.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.models.notification import Notification
from jobportal.repositories.base import BaseRepository


class NotificationRepository(BaseRepository[Notification]):
    def __init__(self):
        super().__init__(Notification)

    async def find_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
        *,
        unread_only: bool = False,
    ) -> List[Notification]:
        """A user's notifications, newest first."""
        query = select(Notification).where(Notification.user_id == user_id)

        if unread_only:
            query = query.where(Notification.is_read == False)  # noqa: E712

        query = query.order_by(Notification.created_at.desc())
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
        notification_id: UUID,
    ) -> Optional[Notification]:
        """Fetch a notification only if it belongs to the user."""
        result = await db.execute(
            select(Notification).where(
                Notification.id == notification_id,
                Notification.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def count_unread(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> int:
        return await self.count(
            db,
            Notification.user_id == user_id,
            Notification.is_read == False,  # noqa: E712
        )
