"""
Pydantic schemas for API validation and serialization.
"""
from jobportal.schemas.base import (
    BaseSchema,
    MessageResponse,
    ErrorResponse,
)
from jobportal.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    RefreshTokenRequest,
    SessionResponse,
)
from jobportal.schemas.job import (
    JobCreate,
    JobListItem,
    JobDetail,
    JobSummary,
    JobFilters,
    JobListResponse,
    JobOptions,
    JobUserState,
    HomeResponse,
)
from jobportal.schemas.application import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationListItem,
)
from jobportal.schemas.saved_job import SavedJobListItem, SaveStateResponse
from jobportal.schemas.notification import (
    NotificationResponse,
    NotificationListItem,
    NotificationListResponse,
)
from jobportal.schemas.profile import ProfileUpdate, ProfileResponse
from jobportal.schemas.company import CompanyResponse
from jobportal.schemas.dashboard import DashboardStats, DashboardResponse

__all__ = [
    # Base
    "BaseSchema",
    "MessageResponse",
    "ErrorResponse",
    # Auth
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "RefreshTokenRequest",
    "SessionResponse",
    # Job
    "JobCreate",
    "JobListItem",
    "JobDetail",
    "JobSummary",
    "JobFilters",
    "JobListResponse",
    "JobOptions",
    "JobUserState",
    "HomeResponse",
    # Application
    "ApplicationCreate",
    "ApplicationResponse",
    "ApplicationListItem",
    # Saved jobs
    "SavedJobListItem",
    "SaveStateResponse",
    # Notification
    "NotificationResponse",
    "NotificationListItem",
    "NotificationListResponse",
    # Profile
    "ProfileUpdate",
    "ProfileResponse",
    # Company
    "CompanyResponse",
    # Dashboard
    "DashboardStats",
    "DashboardResponse",
]
