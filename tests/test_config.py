"""
Tests for settings validation.
"""

import pytest
from pydantic import ValidationError

from jobportal.core.config import Settings

DEV_SECRET = "your-super-secret-key-change-in-production"
POSTGRES = "postgresql+asyncpg://jobportal:pw@db:5432/jobportal"


def test_development_accepts_defaults():
    settings = Settings(environment="development", secret_key=DEV_SECRET)
    assert settings.home_latest_jobs == 6
    assert settings.dashboard_latest_jobs == 4


def test_dev_secret_rejected_in_production():
    with pytest.raises(ValidationError, match="secret_key"):
        Settings(environment="production", secret_key=DEV_SECRET, database_url=POSTGRES)


def test_sqlite_rejected_in_staging():
    with pytest.raises(ValidationError, match="DATABASE_URL"):
        Settings(environment="staging", secret_key="s" * 40, database_url="sqlite+aiosqlite://")


def test_production_with_real_values():
    settings = Settings(environment="production", secret_key="s" * 40, database_url=POSTGRES)
    assert settings.environment == "production"
