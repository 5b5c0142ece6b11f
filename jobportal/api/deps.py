"""
API dependencies for dependency injection.
"""
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.database import get_db
from jobportal.core.exceptions import AuthenticationRequiredException, UnauthorizedException
from jobportal.core.logging import bind_user
from jobportal.core.session import SessionContext
from jobportal.services.auth_service import AuthService

# Security scheme
security = HTTPBearer(auto_error=False)

auth_service = AuthService()


async def get_session(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> SessionContext:
    """
    The authenticated session for this request.

    Raises:
        AuthenticationRequiredException: If no token was sent; the client
            should redirect to the sign-in page.
        InvalidTokenException: If the token is invalid or expired.
    """
    if not credentials:
        raise AuthenticationRequiredException()

    session = await auth_service.resolve_session(db, credentials.credentials)
    request.state.session = session
    bind_user(str(session.user_id))
    return session


async def get_optional_session(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> Optional[SessionContext]:
    """
    The session if the caller is signed in, None otherwise.
    Used by views that render for anonymous visitors too.
    """
    if not credentials:
        return None

    try:
        return await get_session(request, credentials, db)
    except UnauthorizedException:
        return None
