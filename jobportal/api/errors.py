"""
Exception handlers: every error leaves the API as
{"error": <code>, "message": <text>, "details": <object or null>}.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobportal.core.config import settings
from jobportal.core.exceptions import APIException
from jobportal.core.logging import get_logger
from jobportal.schemas.base import ErrorResponse

logger = get_logger(__name__)


def _error(status_code: int, code: str, message: str, details=None, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=code, message=message, details=details).model_dump(),
        headers=headers,
    )


async def api_exception_handler(request: Request, exc: APIException):
    return _error(exc.status_code, exc.code, exc.message, exc.details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Routing errors; an unknown path is the catch-all not-found page."""
    if exc.status_code == 404:
        return _error(404, "NOT_FOUND", f"No route for {request.url.path}", {"redirect_to": "/"})
    return _error(exc.status_code, "HTTP_ERROR", str(exc.detail), headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log full detail, answer with a sanitized message (echoed only in debug)."""
    logger.error(
        "unhandled_exception",
        exc_type=type(exc).__name__,
        exc_message=str(exc),
        path=request.url.path,
        exc_info=True,
    )
    message = str(exc) if settings.debug else "An unexpected error occurred"
    return _error(500, "internal_error", message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
