"""
Rate limiting configuration using slowapi.

Storage defaults to in-process memory; point RATE_LIMIT_STORAGE_URI at Redis
to share limits across workers.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from jobportal.core.config import settings


def _get_user_or_ip(request: Request) -> str:
    """
    Rate-limit key: the session's user ID if one was resolved, otherwise client IP.
    """
    session = getattr(request.state, "session", None)
    if session is not None:
        return str(session.user_id)
    return get_remote_address(request)


limiter = Limiter(
    key_func=_get_user_or_ip,
    storage_uri=settings.rate_limit_storage_uri,
    strategy="fixed-window",
    enabled=settings.rate_limit_enabled,
)

# Pre-defined rate limit strings for use in route decorators:
#   @limiter.limit(RATE_AUTH)
RATE_AUTH = "5/minute"           # login, register - brute-force protection
RATE_WRITE = "30/minute"         # apply, save, post job
