"""
Application model - a user's submission for a job.
"""
import uuid
from typing import TYPE_CHECKING, Optional
from sqlalchemy import CheckConstraint, String, Text, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobportal.models.base import BaseModel, one_of

if TYPE_CHECKING:
    from jobportal.models.job import Job

APPLICATION_STATUSES = ("pending", "reviewed", "accepted", "rejected")


class Application(BaseModel):
    """
    Job application entity.

    Created once per (user, job) with status 'pending'; status changes
    happen on the employer side and are only read here.
    """

    __tablename__ = "applications"

    # One application per user per job
    __table_args__ = (
        UniqueConstraint("user_id", "job_id", name="uq_application_user_job"),
        CheckConstraint(
            one_of("status", APPLICATION_STATUSES),
            name="ck_application_status",
        ),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    job_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    cover_letter: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")

    job: Mapped["Job"] = relationship("Job", back_populates="applications")

    def __repr__(self) -> str:
        return f"<Application user_id={self.user_id} job_id={self.job_id} {self.status}>"
