"""
JobPortal API - FastAPI Application Entry Point.

Job board backend: listings and search, applications, bookmarks, a company
directory, profiles, and per-user notifications with a real-time stream.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from jobportal import __version__
from jobportal.api.errors import register_exception_handlers
from jobportal.api.routes import api_router
from jobportal.core.config import settings
from jobportal.core.database import close_db, init_db
from jobportal.core.events import event_bus
from jobportal.core.logging import RequestIDMiddleware, get_logger, setup_logging
from jobportal.core.rate_limit import limiter
from jobportal.core.session import session_hub

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: logging, tables, session hub. Shutdown releases them in reverse."""
    setup_logging()
    logger.info("starting_app", app_name=settings.app_name, env=settings.environment)
    await init_db()
    session_hub.start()
    logger.info("app_ready", version=__version__)

    yield

    logger.info("shutting_down", open_streams=event_bus.subscriber_count("notifications"))
    event_bus.close()
    session_hub.close()
    await close_db()


app = FastAPI(
    title=settings.app_name,
    description="Job board API: search, apply, save jobs and follow notifications",
    version=__version__,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
register_exception_handlers(app)

app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
)

app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Service info."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "api": settings.api_prefix,
        "docs": "/docs" if settings.debug else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("jobportal.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
