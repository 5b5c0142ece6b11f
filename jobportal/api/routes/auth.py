"""
Authentication routes.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.api.deps import get_optional_session, get_session
from jobportal.core.database import get_db
from jobportal.core.rate_limit import limiter, RATE_AUTH
from jobportal.core.session import SessionContext
from jobportal.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    RefreshTokenRequest,
    SessionResponse,
)
from jobportal.schemas.base import MessageResponse
from jobportal.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])

auth_service = AuthService()


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_AUTH)
async def register(
    request: Request,
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    """Register a new user. Returns access and refresh tokens."""
    return await auth_service.register(
        db,
        email=body.email,
        password=body.password,
        full_name=body.full_name,
    )


@router.post("/login", response_model=TokenResponse)
@limiter.limit(RATE_AUTH)
async def login(
    request: Request,
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """Login with email and password."""
    return await auth_service.login(db, email=body.email, password=body.password)


@router.post("/refresh", response_model=TokenResponse)
async def refresh_token(
    body: RefreshTokenRequest,
    db: AsyncSession = Depends(get_db),
):
    """Refresh access token using refresh token."""
    return await auth_service.refresh(db, refresh_token=body.refresh_token)


@router.post("/logout", response_model=MessageResponse)
async def logout(session: SessionContext = Depends(get_session)):
    """
    Logout current user.

    The client discards its tokens; open notification streams for the user
    are closed.
    """
    auth_service.logout(session)
    return MessageResponse(message="Logged out successfully")


@router.get("/session", response_model=SessionResponse)
async def current_session(session: Optional[SessionContext] = Depends(get_optional_session)):
    """Who the caller is, if anyone."""
    if session is None:
        return SessionResponse(authenticated=False)
    return SessionResponse(
        authenticated=True,
        user_id=session.user_id,
        email=session.email,
        role=session.role,
    )
