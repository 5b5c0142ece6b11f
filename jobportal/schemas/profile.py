"""
User profile schemas.
"""
from datetime import datetime
from typing import Literal, Optional
from uuid import UUID
from pydantic import Field
from jobportal.schemas.base import BaseSchema

# Admin is granted out of band, never through the profile form
Role = Literal["user", "employer"]


class ProfileUpdate(BaseSchema):
    """The whole profile; saved as-is."""

    full_name: Optional[str] = Field(None, max_length=255)
    role: Role = "user"
    resume_url: Optional[str] = None
    preferences: dict = Field(default_factory=dict)


class ProfileResponse(BaseSchema):
    id: UUID
    full_name: Optional[str] = None
    role: str = "user"
    resume_url: Optional[str] = None
    preferences: dict = Field(default_factory=dict)
    updated_at: Optional[datetime] = None
