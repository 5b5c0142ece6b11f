"""
Saved job routes.
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.api.deps import get_session
from jobportal.core.database import get_db
from jobportal.core.session import SessionContext
from jobportal.schemas.saved_job import SavedJobListItem
from jobportal.services.saved_job_service import SavedJobService

router = APIRouter(prefix="/saved-jobs", tags=["saved-jobs"])

saved_job_service = SavedJobService()


@router.get("", response_model=List[SavedJobListItem])
async def list_saved_jobs(
    session: SessionContext = Depends(get_session),
    db: AsyncSession = Depends(get_db),
):
    """The current user's bookmarks, most recent first."""
    return await saved_job_service.list_saved(db, session.user_id)
