"""
Pytest fixtures for the JobPortal API tests.
"""

import os

# IMPORTANT: Set environment variables BEFORE any imports from jobportal
# so Settings, the engine and the limiter are built for tests when first loaded.
os.environ["ENVIRONMENT"] = "development"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key-for-jobportal-tests"

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from jobportal.core.database import Base, build_engine, get_db
from jobportal.core.events import event_bus
from jobportal.core.security import create_access_token, hash_password
from jobportal.core.session import session_hub
from jobportal.main import app
from jobportal.models import Job, User, UserProfile

TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture
async def engine():
    """Fresh in-memory database per test."""
    import jobportal.models  # noqa: F401

    test_engine = build_engine("sqlite+aiosqlite://")
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_maker):
    """Session for arranging and asserting outside the API."""
    async with session_maker() as session:
        yield session


@pytest.fixture(autouse=True)
def session_hub_running():
    """The hub and bus are process-wide; start clean and tear down per test."""
    session_hub.start()
    yield session_hub
    session_hub.close()
    event_bus.close()


@pytest.fixture
async def client(session_maker):
    """Async test client with the database dependency overridden."""

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    """Factory: insert a user with a profile and return (user, auth headers)."""

    async def _make_user(email: str, role: str = "user", full_name: str = None):
        user = User(email=email, password_hash=hash_password(TEST_PASSWORD))
        db.add(user)
        await db.flush()
        db.add(UserProfile(id=user.id, full_name=full_name, role=role, preferences={}))
        await db.commit()

        token = create_access_token({"sub": str(user.id)})
        return user, {"Authorization": f"Bearer {token}"}

    return _make_user


@pytest.fixture
async def seeker(make_user):
    return await make_user("seeker@example.com", full_name="Sam Seeker")


@pytest.fixture
async def auth_headers(seeker):
    return seeker[1]


@pytest.fixture
async def employer(make_user):
    return await make_user("hiring@example.com", role="employer", full_name="Erin Employer")


@pytest.fixture
async def jobs(db):
    """
    A small board, inserted oldest first so insertion order differs from
    the expected newest-first ordering.
    """
    now = datetime.now(timezone.utc)
    rows = [
        Job(
            title="Marketing Lead",
            company="Brandly",
            location="Mombasa",
            category="Marketing",
            job_type="Full-time",
            experience_level="Senior Level",
            salary_range="KES 300k",
            description="Own our brand campaigns.",
            created_at=now - timedelta(days=2),
        ),
        Job(
            title="Sales Associate",
            company="Brandly",
            location="Kisumu",
            category="Sales",
            job_type="Part-time",
            experience_level="Entry Level",
            description="Grow accounts in western Kenya.",
            created_at=now - timedelta(hours=30),
        ),
        Job(
            title="Data Analyst",
            company="Numbers Co",
            location="Nairobi",
            category="Technology",
            job_type="Contract",
            experience_level="Entry Level",
            description="SQL dashboards and reporting.",
            created_at=now - timedelta(hours=5),
        ),
        Job(
            title="Frontend Developer",
            company="Acme",
            location="Remote",
            category="Technology",
            job_type="Full-time",
            experience_level="Mid Level",
            description="React and TypeScript for the Acme web app.",
            created_at=now - timedelta(hours=3),
        ),
        Job(
            title="Backend Engineer",
            company="Acme",
            location="Nairobi, Kenya",
            category="Technology",
            job_type="Full-time",
            experience_level="Senior Level",
            salary_range="KES 450k",
            description="Python services and Postgres.",
            requirements="5+ years of Python",
            created_at=now - timedelta(hours=1),
        ),
    ]
    db.add_all(rows)
    await db.commit()
    return {job.title: job for job in rows}


@pytest.fixture
def user_password():
    """Plain-text password of every user made by make_user."""
    return TEST_PASSWORD
