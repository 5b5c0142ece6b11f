"""
Application schemas.
"""
from typing import Optional
from uuid import UUID
from pydantic import Field
from jobportal.schemas.base import BaseSchema, IDSchema, CreatedAtSchema
from jobportal.schemas.job import JobSummary


class ApplicationCreate(BaseSchema):
    cover_letter: Optional[str] = Field(None, max_length=10000)


class ApplicationResponse(IDSchema, CreatedAtSchema):
    job_id: UUID
    cover_letter: Optional[str] = None
    status: str


class ApplicationListItem(ApplicationResponse):
    job: JobSummary
    applied_ago: str
