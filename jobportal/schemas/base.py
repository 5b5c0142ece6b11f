"""
Base schemas and common response models.
"""
from datetime import datetime
from typing import Any, Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class IDSchema(BaseSchema):
    """Schema mixin for UUID ID."""

    id: UUID


class CreatedAtSchema(BaseSchema):
    created_at: datetime


class MessageResponse(BaseSchema):
    """Simple message response."""

    message: str


class ErrorResponse(BaseSchema):
    """Error response format."""

    error: str
    message: str
    details: Optional[Any] = None
