"""
Tests for authentication endpoints and session-change publishing.
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from jobportal.core.security import create_refresh_token
from jobportal.core.session import SIGNED_IN, SIGNED_OUT, session_hub
from jobportal.models import User

API = "/api/v1"


@pytest.fixture
def session_events():
    seen = []
    unsubscribe = session_hub.subscribe(seen.append)
    yield seen
    unsubscribe()


async def test_register_returns_tokens_and_signs_in(client, session_events):
    response = await client.post(
        f"{API}/auth/register",
        json={"email": "new@example.com", "password": "long-enough-pw", "full_name": "New Person"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["access_token"] and data["refresh_token"]
    assert [event.event for event in session_events] == [SIGNED_IN]

    headers = {"Authorization": f"Bearer {data['access_token']}"}
    profile = await client.get(f"{API}/profile", headers=headers)
    assert profile.json()["full_name"] == "New Person"
    assert profile.json()["role"] == "user"


async def test_register_duplicate_email(client, seeker):
    response = await client.post(
        f"{API}/auth/register",
        json={"email": "seeker@example.com", "password": "long-enough-pw"},
    )

    assert response.status_code == 409
    assert response.json()["error"] == "EMAIL_EXISTS"


async def test_register_race_on_same_email_is_a_conflict(client, seeker, db):
    # Lose the existence check to a concurrent registration
    with patch(
        "jobportal.repositories.user_repository.UserRepository.email_exists",
        AsyncMock(return_value=False),
    ):
        response = await client.post(
            f"{API}/auth/register",
            json={"email": "seeker@example.com", "password": "long-enough-pw"},
        )

    assert response.status_code == 409
    assert response.json()["error"] == "EMAIL_EXISTS"
    users = await db.scalar(select(func.count()).select_from(User))
    assert users == 1


async def test_register_storage_failure(client, session_events):
    failing = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("db down")))

    with patch("jobportal.repositories.user_repository.UserRepository.create", failing):
        response = await client.post(
            f"{API}/auth/register",
            json={"email": "new@example.com", "password": "long-enough-pw"},
        )

    assert response.status_code == 503
    assert response.json()["error"] == "GATEWAY_ERROR"
    assert session_events == []


async def test_login(client, seeker, user_password, session_events):
    user, _ = seeker

    response = await client.post(
        f"{API}/auth/login",
        json={"email": "seeker@example.com", "password": user_password},
    )

    assert response.status_code == 200
    assert session_events[-1].event == SIGNED_IN
    assert session_events[-1].user_id == user.id


async def test_login_wrong_password(client, seeker, session_events):
    response = await client.post(
        f"{API}/auth/login",
        json={"email": "seeker@example.com", "password": "wrong-password"},
    )

    assert response.status_code == 401
    assert response.json()["error"] == "INVALID_CREDENTIALS"
    assert session_events == []


async def test_refresh(client, seeker):
    user, _ = seeker
    refresh_token = create_refresh_token({"sub": str(user.id)})

    response = await client.post(f"{API}/auth/refresh", json={"refresh_token": refresh_token})

    assert response.status_code == 200
    assert response.json()["access_token"]


async def test_access_token_cannot_refresh(client, seeker):
    _, headers = seeker
    access_token = headers["Authorization"].split()[1]

    response = await client.post(f"{API}/auth/refresh", json={"refresh_token": access_token})

    assert response.status_code == 401
    assert response.json()["error"] == "INVALID_TOKEN"


async def test_refresh_token_cannot_authenticate(client, seeker):
    user, _ = seeker
    refresh_token = create_refresh_token({"sub": str(user.id)})

    response = await client.get(
        f"{API}/profile",
        headers={"Authorization": f"Bearer {refresh_token}"},
    )

    assert response.status_code == 401


async def test_logout_publishes_sign_out(client, seeker, session_events):
    user, headers = seeker

    response = await client.post(f"{API}/auth/logout", headers=headers)

    assert response.status_code == 200
    assert session_events[-1].event == SIGNED_OUT
    assert session_events[-1].user_id == user.id


async def test_session_anonymous(client):
    response = await client.get(f"{API}/auth/session")

    assert response.status_code == 200
    assert response.json()["authenticated"] is False


async def test_session_signed_in(client, employer):
    user, headers = employer

    response = await client.get(f"{API}/auth/session", headers=headers)

    data = response.json()
    assert data["authenticated"] is True
    assert data["user_id"] == str(user.id)
    assert data["role"] == "employer"


async def test_session_with_bad_token_is_anonymous(client):
    response = await client.get(
        f"{API}/auth/session",
        headers={"Authorization": "Bearer garbage"},
    )

    assert response.json()["authenticated"] is False
