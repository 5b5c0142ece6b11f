"""
Dashboard route.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.api.deps import get_session
from jobportal.core.database import get_db
from jobportal.core.session import SessionContext
from jobportal.schemas.dashboard import DashboardResponse
from jobportal.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

dashboard_service = DashboardService()


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    session: SessionContext = Depends(get_session),
    db: AsyncSession = Depends(get_db),
):
    """Profile, activity counts and the latest jobs."""
    return await dashboard_service.get_dashboard(db, session.user_id)
