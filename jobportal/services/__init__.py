"""
Service layer - business logic and orchestration.

Services contain the application's business logic, coordinate between
repositories, and handle cross-cutting concerns.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from jobportal.services.auth_service import AuthService
from jobportal.services.job_service import JobService
from jobportal.services.application_service import ApplicationService
from jobportal.services.saved_job_service import SavedJobService
from jobportal.services.notification_service import NotificationService
from jobportal.services.profile_service import ProfileService
from jobportal.services.company_service import CompanyService
from jobportal.services.dashboard_service import DashboardService

__all__ = [
    "AuthService",
    "JobService",
    "ApplicationService",
    "SavedJobService",
    "NotificationService",
    "ProfileService",
    "CompanyService",
    "DashboardService",
]
