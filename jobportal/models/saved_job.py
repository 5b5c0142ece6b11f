"""
SavedJob model - a user's bookmark of a job.
"""
import uuid
from typing import TYPE_CHECKING
from sqlalchemy import ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobportal.models.base import BaseModel

if TYPE_CHECKING:
    from jobportal.models.job import Job


class SavedJob(BaseModel):
    __tablename__ = "saved_jobs"

    __table_args__ = (
        UniqueConstraint("user_id", "job_id", name="uq_saved_job_user_job"),
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

    job: Mapped["Job"] = relationship("Job", back_populates="saves")

    def __repr__(self) -> str:
        return f"<SavedJob user_id={self.user_id} job_id={self.job_id}>"
