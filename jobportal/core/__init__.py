"""Core module exports."""
from jobportal.core.config import settings, get_settings
from jobportal.core.database import Base, get_db, init_db, close_db, engine, async_session_maker
from jobportal.core.security import (
    verify_password,
    hash_password,
    create_access_token,
    create_refresh_token,
    decode_token,
    verify_token_type,
)
from jobportal.core.exceptions import (
    APIException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    GatewayException,
    AuthenticationRequiredException,
    InvalidCredentialsException,
    InvalidTokenException,
    EmailAlreadyExistsException,
    JobNotFoundException,
    NotificationNotFoundException,
    AlreadyAppliedException,
)
from jobportal.core.session import SessionContext, SessionHub, session_hub
from jobportal.core.events import EventBus, RowEvent, Subscription, event_bus
from jobportal.core.cancellation import CancellationToken, OperationCancelled, run_guarded

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    "engine",
    "async_session_maker",
    # Security
    "verify_password",
    "hash_password",
    "create_access_token",
    "create_refresh_token",
    "decode_token",
    "verify_token_type",
    # Exceptions
    "APIException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "GatewayException",
    "AuthenticationRequiredException",
    "InvalidCredentialsException",
    "InvalidTokenException",
    "EmailAlreadyExistsException",
    "JobNotFoundException",
    "NotificationNotFoundException",
    "AlreadyAppliedException",
    # Session and real-time
    "SessionContext",
    "SessionHub",
    "session_hub",
    "EventBus",
    "RowEvent",
    "Subscription",
    "event_bus",
    "CancellationToken",
    "OperationCancelled",
    "run_guarded",
]
