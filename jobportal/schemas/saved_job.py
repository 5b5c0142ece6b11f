"""
Saved job schemas.
"""
from uuid import UUID
from jobportal.schemas.base import BaseSchema, IDSchema, CreatedAtSchema
from jobportal.schemas.job import JobSummary


class SavedJobListItem(IDSchema, CreatedAtSchema):
    job_id: UUID
    job: JobSummary
    saved_ago: str


class SaveStateResponse(BaseSchema):
    """Result of a save / unsave; reported after the write is committed."""

    job_id: UUID
    saved: bool
    message: str
