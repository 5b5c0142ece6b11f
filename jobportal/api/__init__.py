"""
API package.
"""
from jobportal.api.routes import api_router
from jobportal.api.deps import get_session, get_optional_session

__all__ = [
    "api_router",
    "get_session",
    "get_optional_session",
]
