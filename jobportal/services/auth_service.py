"""
Authentication service - accounts, tokens and session resolution.

Stands in for the hosted auth provider: email/password accounts, JWT
access/refresh pairs, and sign-in/sign-out announcements on the session hub.
"""
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.config import settings
from jobportal.core.security import (
    verify_password,
    hash_password,
    create_access_token,
    create_refresh_token,
    decode_token,
    verify_token_type,
    ACCESS_TOKEN,
    REFRESH_TOKEN,
)
from jobportal.core.exceptions import (
    InvalidCredentialsException,
    EmailAlreadyExistsException,
    GatewayException,
    InvalidTokenException,
)
from jobportal.core.logging import get_logger
from jobportal.core.session import SIGNED_IN, SIGNED_OUT, SessionContext, session_hub
from jobportal.models.user import User
from jobportal.repositories.profile_repository import ProfileRepository
from jobportal.repositories.user_repository import UserRepository
from jobportal.schemas.auth import TokenResponse

logger = get_logger(__name__)


def session_for(user: User) -> SessionContext:
    """Session context for a user loaded with its profile. No profile means role 'user'."""
    role = user.profile.role if user.profile is not None else "user"
    return SessionContext(user_id=user.id, email=user.email, role=role)


def parse_subject(payload: dict) -> UUID:
    """The user id carried in a token's ``sub`` claim."""
    try:
        return UUID(str(payload.get("sub")))
    except ValueError:
        raise InvalidTokenException()


class AuthService:
    """Handles all authentication business logic."""

    def __init__(self):
        self.user_repo = UserRepository()
        self.profile_repo = ProfileRepository()

    async def register(
        self,
        db: AsyncSession,
        *,
        email: str,
        password: str,
        full_name: Optional[str] = None,
    ) -> TokenResponse:
        """
        Create the account and an empty 'user' profile, then sign in.

        Raises:
            EmailAlreadyExistsException: If email is already registered.
            GatewayException: If the account cannot be written.
        """
        if await self.user_repo.email_exists(db, email):
            raise EmailAlreadyExistsException()

        try:
            user = await self.user_repo.create(
                db,
                email=email.lower(),
                password_hash=hash_password(password),
            )
            await self.profile_repo.create(
                db,
                id=user.id,
                full_name=full_name,
                role="user",
                preferences={},
            )
            await db.commit()
        except IntegrityError:
            # Same email registered concurrently
            await db.rollback()
            raise EmailAlreadyExistsException()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("user_register_failed", error=str(e))
            raise GatewayException("Failed to create account")

        logger.info("user_registered", user_id=str(user.id))
        return self._sign_in(user.id)

    async def login(
        self,
        db: AsyncSession,
        *,
        email: str,
        password: str,
    ) -> TokenResponse:
        """
        Raises:
            InvalidCredentialsException: If email/password is wrong or the
                account is deactivated.
        """
        user = await self.user_repo.get_active_by_email(db, email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("login_failed")
            raise InvalidCredentialsException()

        user.last_seen_at = datetime.now(timezone.utc)
        await db.commit()
        return self._sign_in(user.id)

    async def refresh(
        self,
        db: AsyncSession,
        *,
        refresh_token: str,
    ) -> TokenResponse:
        """
        New token pair for a valid refresh token. Not a new sign-in.

        Raises:
            InvalidTokenException: If refresh token is invalid or expired.
        """
        user = await self._user_for_token(db, refresh_token, REFRESH_TOKEN)
        return self._generate_tokens(user.id)

    async def resolve_session(
        self,
        db: AsyncSession,
        token: str,
    ) -> SessionContext:
        """
        Turn an access token into a session context.

        Raises:
            InvalidTokenException: If the token is invalid, expired, or its
                user no longer exists.
        """
        user = await self._user_for_token(db, token, ACCESS_TOKEN)
        return session_for(user)

    @staticmethod
    def logout(session: SessionContext) -> None:
        """
        Tokens are discarded client-side; announcing the sign-out lets open
        streams for this user shut down.
        """
        session_hub.publish(SIGNED_OUT, session.user_id)
        logger.info("user_logged_out", user_id=str(session.user_id))

    async def _user_for_token(self, db: AsyncSession, token: str, token_type: str) -> User:
        payload = decode_token(token)
        if not payload or not verify_token_type(payload, token_type):
            raise InvalidTokenException()

        user = await self.user_repo.get_active_by_id(db, parse_subject(payload))
        if user is None:
            raise InvalidTokenException()
        return user

    def _sign_in(self, user_id: UUID) -> TokenResponse:
        tokens = self._generate_tokens(user_id)
        session_hub.publish(SIGNED_IN, user_id)
        return tokens

    @staticmethod
    def _generate_tokens(user_id: UUID) -> TokenResponse:
        claims = {"sub": str(user_id)}
        return TokenResponse(
            access_token=create_access_token(claims),
            refresh_token=create_refresh_token(claims),
            expires_in=settings.access_token_expire_minutes * 60,
        )
