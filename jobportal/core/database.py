"""
Async database engine and session management.

The database is the storage side of the data gateway: every table the
application reads or writes lives here, and every query goes through an
AsyncSession handed out by get_db().
"""
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from jobportal.core.config import settings


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


def build_engine(url: str) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    SQLite (used for local runs and tests) gets a single shared connection;
    every other backend gets a sized connection pool.
    """
    if url.startswith("sqlite"):
        return create_async_engine(
            url,
            echo=settings.db_echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_async_engine(
        url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
    )


engine = build_engine(settings.database_url)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that yields a database session per request."""
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db(bind: AsyncEngine = None) -> None:
    """Create tables that do not exist yet."""
    # Import models so every table is registered on Base.metadata
    import jobportal.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose of the engine's connection pool."""
    await engine.dispose()
