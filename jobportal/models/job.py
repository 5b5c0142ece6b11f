"""
Job model - a posted position.
"""
import uuid
from typing import TYPE_CHECKING, Optional, List
from sqlalchemy import String, Text, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobportal.models.base import BaseModel

if TYPE_CHECKING:
    from jobportal.models.application import Application
    from jobportal.models.saved_job import SavedJob


# Values offered by the posting form and the listing filters
JOB_CATEGORIES = [
    "Technology",
    "Marketing",
    "Sales",
    "Design",
    "Finance",
    "Healthcare",
    "Education",
    "Other",
]
JOB_TYPES = ["Full-time", "Part-time", "Contract", "Freelance", "Internship"]
EXPERIENCE_LEVELS = ["Entry Level", "Mid Level", "Senior Level", "Executive"]


class Job(BaseModel):
    """
    Job posting entity.

    Created by employers and read by everyone; never edited through the API.
    """

    __tablename__ = "jobs"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    company: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    job_type: Mapped[str] = mapped_column(String(50), nullable=False)
    experience_level: Mapped[str] = mapped_column(String(50), nullable=False)
    salary_range: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    requirements: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    posted_by: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # Relationships
    applications: Mapped[List["Application"]] = relationship(
        "Application",
        back_populates="job",
        cascade="all, delete-orphan",
    )
    saves: Mapped[List["SavedJob"]] = relationship(
        "SavedJob",
        back_populates="job",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Job {self.title} at {self.company}>"
