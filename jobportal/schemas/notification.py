"""
Notification schemas.
"""
from typing import List, Optional
from uuid import UUID
from jobportal.schemas.base import BaseSchema, IDSchema, CreatedAtSchema


class NotificationResponse(IDSchema, CreatedAtSchema):
    user_id: UUID
    title: Optional[str] = None
    message: str
    is_read: bool


class NotificationListItem(NotificationResponse):
    created_ago: str


class NotificationListResponse(BaseSchema):
    items: List[NotificationListItem]
    unread_count: int
