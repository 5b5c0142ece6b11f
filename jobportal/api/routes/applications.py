"""
Application routes.
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.api.deps import get_session
from jobportal.core.database import get_db
from jobportal.core.session import SessionContext
from jobportal.schemas.application import ApplicationListItem
from jobportal.services.application_service import ApplicationService

router = APIRouter(prefix="/applications", tags=["applications"])

application_service = ApplicationService()


@router.get("", response_model=List[ApplicationListItem])
async def list_applications(
    session: SessionContext = Depends(get_session),
    db: AsyncSession = Depends(get_db),
):
    """The current user's applications, newest first."""
    return await application_service.list_applications(db, session.user_id)
