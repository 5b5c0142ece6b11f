"""
Repository layer - the data gateway's query surface.

Repositories hold every select/insert/update/delete the application issues,
keeping SQL/ORM logic out of the service and route layers.
"""
from jobportal.repositories.base import BaseRepository, UserJobRepository
from jobportal.repositories.user_repository import UserRepository
from jobportal.repositories.profile_repository import ProfileRepository
from jobportal.repositories.job_repository import JobRepository
from jobportal.repositories.application_repository import ApplicationRepository
from jobportal.repositories.saved_job_repository import SavedJobRepository
from jobportal.repositories.notification_repository import NotificationRepository

__all__ = [
    "BaseRepository",
    "UserJobRepository",
    "UserRepository",
    "ProfileRepository",
    "JobRepository",
    "ApplicationRepository",
    "SavedJobRepository",
    "NotificationRepository",
]
