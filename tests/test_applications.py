"""
Tests for applying to jobs and listing applications.
"""

from unittest.mock import AsyncMock, patch
from uuid import uuid4

from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from jobportal.core.events import event_bus
from jobportal.models import Application, Notification

API = "/api/v1"


async def count(db, model):
    return await db.scalar(select(func.count()).select_from(model))


class TestApply:
    async def test_unauthenticated_apply_creates_nothing(self, client, db, jobs):
        job = jobs["Backend Engineer"]

        response = await client.post(f"{API}/jobs/{job.id}/apply", json={"cover_letter": "Hi"})

        assert response.status_code == 401
        body = response.json()
        assert body["error"] == "AUTH_REQUIRED"
        assert body["details"]["redirect_to"] == "/auth"
        assert await count(db, Application) == 0

    async def test_invalid_token_redirects_to_auth(self, client, db, jobs):
        job = jobs["Backend Engineer"]

        response = await client.post(
            f"{API}/jobs/{job.id}/apply",
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 401
        assert response.json()["details"]["redirect_to"] == "/auth"
        assert await count(db, Application) == 0

    async def test_apply_creates_pending_application(self, client, db, jobs, seeker):
        user, headers = seeker
        job = jobs["Backend Engineer"]

        response = await client.post(
            f"{API}/jobs/{job.id}/apply",
            json={"cover_letter": "I love Python."},
            headers=headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["cover_letter"] == "I love Python."
        assert data["job_id"] == str(job.id)

        application = await db.scalar(select(Application))
        assert application.user_id == user.id

    async def test_cover_letter_optional(self, client, jobs, auth_headers):
        job = jobs["Data Analyst"]

        response = await client.post(f"{API}/jobs/{job.id}/apply", headers=auth_headers)

        assert response.status_code == 201
        assert response.json()["cover_letter"] is None

    async def test_second_application_conflicts(self, client, db, jobs, auth_headers):
        job = jobs["Backend Engineer"]
        url = f"{API}/jobs/{job.id}/apply"

        first = await client.post(url, json={}, headers=auth_headers)
        second = await client.post(url, json={}, headers=auth_headers)

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()["error"] == "ALREADY_APPLIED"
        assert await count(db, Application) == 1

    async def test_unknown_job(self, client, db, auth_headers):
        response = await client.post(f"{API}/jobs/{uuid4()}/apply", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["details"]["redirect_to"] == "/jobs"
        assert await count(db, Application) == 0

    async def test_applicant_is_notified(self, client, db, jobs, seeker):
        user, headers = seeker
        job = jobs["Marketing Lead"]
        feed = event_bus.subscribe(
            "notifications",
            where=lambda record: record["user_id"] == str(user.id),
        )

        await client.post(f"{API}/jobs/{job.id}/apply", headers=headers)

        notification = await db.scalar(select(Notification))
        assert notification.user_id == user.id
        assert notification.title == "Application submitted"
        assert notification.message == (
            "Your application for Marketing Lead at Brandly has been received."
        )
        assert not notification.is_read

        event = await feed.get()
        assert event.record["id"] == str(notification.id)

    async def test_failed_write_reports_error_and_no_state(self, client, db, jobs, auth_headers):
        job = jobs["Backend Engineer"]
        failing = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("db down")))

        with patch(
            "jobportal.repositories.application_repository.ApplicationRepository.create",
            failing,
        ):
            response = await client.post(f"{API}/jobs/{job.id}/apply", headers=auth_headers)

        assert response.status_code == 503
        assert response.json()["error"] == "GATEWAY_ERROR"
        assert await count(db, Application) == 0
        assert await count(db, Notification) == 0

        status = await client.get(f"{API}/jobs/{job.id}/status", headers=auth_headers)
        assert status.json()["applied"] is False


class TestJobStatus:
    async def test_reflects_committed_state(self, client, jobs, auth_headers):
        job = jobs["Frontend Developer"]
        url = f"{API}/jobs/{job.id}/status"

        before = await client.get(url, headers=auth_headers)
        assert before.json() == {"job_id": str(job.id), "applied": False, "saved": False}

        await client.post(f"{API}/jobs/{job.id}/apply", headers=auth_headers)
        await client.put(f"{API}/jobs/{job.id}/save", headers=auth_headers)

        after = await client.get(url, headers=auth_headers)
        assert after.json() == {"job_id": str(job.id), "applied": True, "saved": True}

    async def test_requires_session(self, client, jobs):
        job = jobs["Frontend Developer"]
        response = await client.get(f"{API}/jobs/{job.id}/status")
        assert response.status_code == 401


class TestListApplications:
    async def test_newest_first_with_job_summary(self, client, jobs, auth_headers):
        for title in ("Marketing Lead", "Data Analyst"):
            await client.post(f"{API}/jobs/{jobs[title].id}/apply", headers=auth_headers)

        response = await client.get(f"{API}/applications", headers=auth_headers)

        assert response.status_code == 200
        items = response.json()
        assert [item["job"]["title"] for item in items] == ["Data Analyst", "Marketing Lead"]
        assert items[0]["job"]["company"] == "Numbers Co"
        assert items[0]["applied_ago"] == "0h ago"

    async def test_only_own_applications(self, client, jobs, auth_headers, make_user):
        _, other_headers = await make_user("other@example.com")
        await client.post(f"{API}/jobs/{jobs['Data Analyst'].id}/apply", headers=other_headers)

        response = await client.get(f"{API}/applications", headers=auth_headers)

        assert response.json() == []
