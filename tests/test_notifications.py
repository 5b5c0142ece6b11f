"""
Tests for the notification inbox.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from jobportal.models import Notification
from jobportal.services.notification_service import NotificationService

API = "/api/v1"


@pytest.fixture
async def inbox(db, seeker):
    """Two notifications for the seeker: one old and read, one new and unread."""
    user, _ = seeker
    now = datetime.now(timezone.utc)
    old = Notification(
        user_id=user.id,
        title="Welcome",
        message="Thanks for joining.",
        is_read=True,
        created_at=now - timedelta(days=3),
    )
    new = Notification(
        user_id=user.id,
        title="Application submitted",
        message="Your application for Backend Engineer at Acme has been received.",
        is_read=False,
        created_at=now - timedelta(hours=2),
    )
    db.add_all([old, new])
    await db.commit()
    return {"old": old, "new": new}


async def test_list_newest_first_with_unread_count(client, inbox, auth_headers):
    response = await client.get(f"{API}/notifications", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert [item["title"] for item in data["items"]] == ["Application submitted", "Welcome"]
    assert [item["created_ago"] for item in data["items"]] == ["2h ago", "3d ago"]
    assert data["unread_count"] == 1


async def test_unread_only(client, inbox, auth_headers):
    response = await client.get(
        f"{API}/notifications",
        params={"unread_only": True},
        headers=auth_headers,
    )

    assert [item["title"] for item in response.json()["items"]] == ["Application submitted"]


async def test_mark_read(client, session_maker, inbox, auth_headers):
    notification = inbox["new"]

    response = await client.patch(
        f"{API}/notifications/{notification.id}/read",
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["is_read"] is True

    async with session_maker() as fresh:
        stored = await fresh.get(Notification, notification.id)
        assert stored.is_read is True

    listing = await client.get(f"{API}/notifications", headers=auth_headers)
    assert listing.json()["unread_count"] == 0


async def test_mark_read_is_one_way(client, inbox, auth_headers):
    notification = inbox["old"]

    response = await client.patch(
        f"{API}/notifications/{notification.id}/read",
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["is_read"] is True


async def test_delete_leaves_no_record(client, db, inbox, auth_headers):
    notification = inbox["new"]

    response = await client.delete(
        f"{API}/notifications/{notification.id}",
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Notification deleted"
    remaining = await db.scalar(
        select(func.count()).select_from(Notification).where(Notification.id == notification.id)
    )
    assert remaining == 0

    again = await client.delete(f"{API}/notifications/{notification.id}", headers=auth_headers)
    assert again.status_code == 404


async def test_other_users_notification_is_not_found(client, db, inbox, make_user):
    _, other_headers = await make_user("other@example.com")
    notification = inbox["new"]

    read = await client.patch(
        f"{API}/notifications/{notification.id}/read",
        headers=other_headers,
    )
    deleted = await client.delete(
        f"{API}/notifications/{notification.id}",
        headers=other_headers,
    )

    assert read.status_code == 404
    assert deleted.status_code == 404
    assert read.json()["error"] == "NOTIFICATION_NOT_FOUND"
    remaining = await db.scalar(select(func.count()).select_from(Notification))
    assert remaining == 2


async def test_unknown_notification(client, auth_headers):
    response = await client.patch(f"{API}/notifications/{uuid4()}/read", headers=auth_headers)
    assert response.status_code == 404


async def test_requires_session(client):
    response = await client.get(f"{API}/notifications")

    assert response.status_code == 401
    assert response.json()["error"] == "AUTH_REQUIRED"


async def test_create_announces_to_the_addressee_only(db, seeker, make_user):
    user, _ = seeker
    other, _ = await make_user("other@example.com")
    service = NotificationService()
    mine = service.subscribe(user.id)
    theirs = service.subscribe(other.id)

    created = await service.create(db, user.id, "Hello", title="Greeting")

    event = await mine.get()
    assert event.record["id"] == str(created.id)
    assert event.record["message"] == "Hello"
    theirs.unsubscribe()
    assert await theirs.get() is None
