"""
Notification model - messages addressed to a single user.
"""
import uuid
from typing import Optional
from sqlalchemy import String, Boolean, Text, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from jobportal.models.base import BaseModel


class Notification(BaseModel):
    """
    Notification entity.

    Only the owning user may mark it read or delete it. Deletion is a hard
    delete; nothing is kept behind.
    """

    __tablename__ = "notifications"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    is_read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Notification user_id={self.user_id} read={self.is_read}>"
