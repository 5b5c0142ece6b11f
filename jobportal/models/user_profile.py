"""
UserProfile model - public profile and role of a user.
"""
import uuid
from typing import TYPE_CHECKING, Optional
from sqlalchemy import CheckConstraint, String, Text, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobportal.core.database import Base
from jobportal.models.base import CreatedAtMixin, UpdatedAtMixin, JSONType, one_of

if TYPE_CHECKING:
    from jobportal.models.user import User

PROFILE_ROLES = ("user", "employer", "admin")


class UserProfile(Base, CreatedAtMixin, UpdatedAtMixin):
    """
    Profile entity. The primary key is the user's id; the row is written
    wholesale (upsert) every time the profile is saved.
    """

    __tablename__ = "user_profiles"
    __table_args__ = (CheckConstraint(one_of("role", PROFILE_ROLES), name="ck_profile_role"),)

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    full_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="user")
    resume_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    preferences: Mapped[dict] = mapped_column(JSONType, default=dict)

    user: Mapped["User"] = relationship("User", back_populates="profile")

    def __repr__(self) -> str:
        return f"<UserProfile {self.id} role={self.role}>"
