"""
Profile routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.api.deps import get_session
from jobportal.core.database import get_db
from jobportal.core.session import SessionContext
from jobportal.schemas.profile import ProfileResponse, ProfileUpdate
from jobportal.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])

profile_service = ProfileService()


@router.get("", response_model=ProfileResponse)
async def get_profile(
    session: SessionContext = Depends(get_session),
    db: AsyncSession = Depends(get_db),
):
    return await profile_service.get_profile(db, session.user_id)


@router.put("", response_model=ProfileResponse)
async def save_profile(
    body: ProfileUpdate,
    session: SessionContext = Depends(get_session),
    db: AsyncSession = Depends(get_db),
):
    """Save the whole profile."""
    return await profile_service.save_profile(db, session.user_id, body)
