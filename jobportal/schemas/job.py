"""
Job schemas.
"""
from typing import List, Literal, Optional
from uuid import UUID
from pydantic import Field
from jobportal.schemas.base import BaseSchema, IDSchema, CreatedAtSchema

Category = Literal[
    "Technology", "Marketing", "Sales", "Design",
    "Finance", "Healthcare", "Education", "Other",
]
JobType = Literal["Full-time", "Part-time", "Contract", "Freelance", "Internship"]
ExperienceLevel = Literal["Entry Level", "Mid Level", "Senior Level", "Executive"]


class JobBase(BaseSchema):
    """Base job schema."""

    title: str
    company: str
    location: str
    category: str
    job_type: str
    experience_level: str
    salary_range: Optional[str] = None


class JobCreate(BaseSchema):
    """Body of the post-job form."""

    title: str = Field(..., min_length=1, max_length=255)
    company: str = Field(..., min_length=1, max_length=255)
    location: str = Field(..., min_length=1, max_length=255)
    category: Category
    job_type: JobType
    experience_level: ExperienceLevel
    salary_range: Optional[str] = Field(None, max_length=100)
    description: str = Field(..., min_length=1)
    requirements: Optional[str] = None


class JobListItem(JobBase, IDSchema, CreatedAtSchema):
    """Job card: everything but the long text."""

    description: str
    posted_ago: str


class JobDetail(JobListItem):
    """Full job detail."""

    requirements: Optional[str] = None
    posted_by: Optional[UUID] = None


class JobSummary(IDSchema):
    """Job fields embedded in application and bookmark listings."""

    title: str
    company: str
    location: str
    job_type: str
    salary_range: Optional[str] = None


class JobFilters(BaseSchema):
    """Job filtering parameters."""

    search: Optional[str] = None  # title, description or company
    location: Optional[str] = None
    category: Optional[str] = None
    job_type: Optional[str] = None
    experience_level: Optional[str] = None
    company: Optional[str] = None


class JobListResponse(BaseSchema):
    items: List[JobListItem]
    total: int
    categories: List[str] = []


class JobOptions(BaseSchema):
    """Values the listing filters and the post-job form offer."""

    categories: List[str]
    job_types: List[str]
    experience_levels: List[str]


class JobUserState(BaseSchema):
    """Where the current user stands with a job."""

    job_id: UUID
    applied: bool
    saved: bool


class HomeResponse(BaseSchema):
    jobs: List[JobListItem]
    categories: List[str]
