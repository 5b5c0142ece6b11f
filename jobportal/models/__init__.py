"""
Database models for JobPortal.

One model per gateway table. All use UUID primary keys and creation timestamps.
"""
from jobportal.models.base import BaseModel, CreatedAtMixin, UpdatedAtMixin, UUIDMixin
from jobportal.models.user import User
from jobportal.models.user_profile import UserProfile, PROFILE_ROLES
from jobportal.models.job import Job, JOB_CATEGORIES, JOB_TYPES, EXPERIENCE_LEVELS
from jobportal.models.application import Application, APPLICATION_STATUSES
from jobportal.models.saved_job import SavedJob
from jobportal.models.notification import Notification

__all__ = [
    "BaseModel",
    "CreatedAtMixin",
    "UpdatedAtMixin",
    "UUIDMixin",
    "User",
    "UserProfile",
    "PROFILE_ROLES",
    "Job",
    "JOB_CATEGORIES",
    "JOB_TYPES",
    "EXPERIENCE_LEVELS",
    "Application",
    "APPLICATION_STATUSES",
    "SavedJob",
    "Notification",
]
