"""
Notification service - a user's inbox and its real-time feed.

Read-state only moves one way (unread -> read). Deleting a notification
removes the row outright.
"""
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.events import event_bus, Subscription
from jobportal.core.exceptions import GatewayException, NotificationNotFoundException
from jobportal.core.logging import get_logger
from jobportal.models.notification import Notification
from jobportal.repositories.notification_repository import NotificationRepository
from jobportal.schemas.base import MessageResponse
from jobportal.schemas.notification import (
    NotificationListItem,
    NotificationListResponse,
    NotificationResponse,
)
from jobportal.services.aggregates import time_ago

logger = get_logger(__name__)

TABLE = "notifications"


class NotificationService:
    """Lists, creates, reads and deletes notifications."""

    def __init__(self):
        self.notification_repo = NotificationRepository()

    async def list_notifications(
        self,
        db: AsyncSession,
        user_id: UUID,
        *,
        unread_only: bool = False,
    ) -> NotificationListResponse:
        """
        A user's notifications, newest first, with the unread count.

        A gateway failure yields an empty inbox and a logged diagnostic.
        """
        try:
            notifications = await self.notification_repo.find_for_user(
                db, user_id, unread_only=unread_only
            )
        except SQLAlchemyError as e:
            logger.error("notification_fetch_failed", error=str(e))
            notifications = []

        items = [self._to_list_item(n) for n in notifications]
        return NotificationListResponse(
            items=items,
            unread_count=sum(1 for item in items if not item.is_read),
        )

    async def count_unread(self, db: AsyncSession, user_id: UUID) -> int:
        return await self.notification_repo.count_unread(db, user_id)

    async def create(
        self,
        db: AsyncSession,
        user_id: UUID,
        message: str,
        *,
        title: Optional[str] = None,
        commit: bool = True,
    ) -> NotificationResponse:
        """
        Insert a notification and announce it on the real-time channel.

        With commit=False the caller owns the transaction and must call
        announce() after committing.
        """
        notification = await self.notification_repo.create(
            db,
            user_id=user_id,
            title=title,
            message=message,
            is_read=False,
        )
        response = NotificationResponse.model_validate(notification)
        if commit:
            await db.commit()
            self.announce(response)
        return response

    @staticmethod
    def announce(notification: NotificationResponse) -> None:
        delivered = event_bus.publish_insert(TABLE, notification.model_dump(mode="json"))
        logger.debug(
            "notification_published",
            notification_id=str(notification.id),
            subscribers=delivered,
        )

    async def mark_read(
        self,
        db: AsyncSession,
        user_id: UUID,
        notification_id: UUID,
    ) -> NotificationResponse:
        """
        Raises:
            NotificationNotFoundException: If it doesn't exist or isn't the user's.
            GatewayException: If the update fails.
        """
        notification = await self._get_user_notification(db, user_id, notification_id)
        if not notification.is_read:
            try:
                notification = await self.notification_repo.update(db, notification, is_read=True)
                await db.commit()
            except SQLAlchemyError as e:
                await db.rollback()
                logger.error("notification_update_failed", error=str(e))
                raise GatewayException("Failed to update notification")
        return NotificationResponse.model_validate(notification)

    async def delete(
        self,
        db: AsyncSession,
        user_id: UUID,
        notification_id: UUID,
    ) -> MessageResponse:
        notification = await self._get_user_notification(db, user_id, notification_id)
        try:
            await self.notification_repo.delete(db, notification.id)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("notification_delete_failed", error=str(e))
            raise GatewayException("Failed to delete notification")
        logger.info("notification_deleted", notification_id=str(notification_id))
        return MessageResponse(message="Notification deleted")

    @staticmethod
    def subscribe(user_id: UUID) -> Subscription:
        """Real-time feed of new notifications addressed to one user."""
        wanted = str(user_id)
        return event_bus.subscribe(TABLE, where=lambda record: record.get("user_id") == wanted)

    async def _get_user_notification(
        self,
        db: AsyncSession,
        user_id: UUID,
        notification_id: UUID,
    ) -> Notification:
        """Another user's notification is reported as not found."""
        notification = await self.notification_repo.get_for_user(db, user_id, notification_id)
        if not notification:
            raise NotificationNotFoundException()
        return notification

    @staticmethod
    def _to_list_item(notification: Notification) -> NotificationListItem:
        return NotificationListItem(
            id=notification.id,
            user_id=notification.user_id,
            title=notification.title,
            message=notification.message,
            is_read=notification.is_read,
            created_at=notification.created_at,
            created_ago=time_ago(notification.created_at),
        )
