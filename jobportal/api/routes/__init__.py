"""
API Routes package.
"""
from fastapi import APIRouter

from jobportal.api.routes.auth import router as auth_router
from jobportal.api.routes.health import router as health_router
from jobportal.api.routes.home import router as home_router
from jobportal.api.routes.jobs import router as jobs_router
from jobportal.api.routes.applications import router as applications_router
from jobportal.api.routes.saved_jobs import router as saved_jobs_router
from jobportal.api.routes.companies import router as companies_router
from jobportal.api.routes.notifications import router as notifications_router
from jobportal.api.routes.profile import router as profile_router
from jobportal.api.routes.dashboard import router as dashboard_router

# Main API router
api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(home_router)
api_router.include_router(jobs_router)
api_router.include_router(applications_router)
api_router.include_router(saved_jobs_router)
api_router.include_router(companies_router)
api_router.include_router(notifications_router)
api_router.include_router(profile_router)
api_router.include_router(dashboard_router)

__all__ = [
    "api_router",
    "auth_router",
    "health_router",
    "home_router",
    "jobs_router",
    "applications_router",
    "saved_jobs_router",
    "companies_router",
    "notifications_router",
    "profile_router",
    "dashboard_router",
]
