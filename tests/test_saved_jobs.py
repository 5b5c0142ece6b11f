"""
Tests for saving and unsaving jobs.
"""

from uuid import uuid4

from sqlalchemy import func, select

from jobportal.models import SavedJob

API = "/api/v1"


async def saved_count(db):
    return await db.scalar(select(func.count()).select_from(SavedJob))


async def test_save_then_unsave_leaves_no_record(client, db, jobs, auth_headers):
    url = f"{API}/jobs/{jobs['Backend Engineer'].id}/save"

    saved = await client.put(url, headers=auth_headers)
    assert saved.status_code == 200
    assert saved.json()["saved"] is True
    assert saved.json()["message"] == "Job saved successfully"
    assert await saved_count(db) == 1

    removed = await client.delete(url, headers=auth_headers)
    assert removed.status_code == 200
    assert removed.json()["saved"] is False
    assert await saved_count(db) == 0


async def test_saving_twice_keeps_one_record(client, db, jobs, auth_headers):
    url = f"{API}/jobs/{jobs['Backend Engineer'].id}/save"

    await client.put(url, headers=auth_headers)
    again = await client.put(url, headers=auth_headers)

    assert again.status_code == 200
    assert again.json()["saved"] is True
    assert again.json()["message"] == "Job already saved"
    assert await saved_count(db) == 1


async def test_unsave_when_not_saved(client, db, jobs, auth_headers):
    url = f"{API}/jobs/{jobs['Backend Engineer'].id}/save"

    response = await client.delete(url, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["saved"] is False


async def test_unauthenticated_save_creates_nothing(client, db, jobs):
    response = await client.put(f"{API}/jobs/{jobs['Backend Engineer'].id}/save")

    assert response.status_code == 401
    assert response.json()["details"]["redirect_to"] == "/auth"
    assert await saved_count(db) == 0


async def test_save_unknown_job(client, db, auth_headers):
    response = await client.put(f"{API}/jobs/{uuid4()}/save", headers=auth_headers)

    assert response.status_code == 404
    assert await saved_count(db) == 0


async def test_saved_jobs_listing(client, jobs, auth_headers, make_user):
    _, other_headers = await make_user("other@example.com")
    await client.put(f"{API}/jobs/{jobs['Sales Associate'].id}/save", headers=other_headers)
    for title in ("Sales Associate", "Backend Engineer"):
        await client.put(f"{API}/jobs/{jobs[title].id}/save", headers=auth_headers)

    response = await client.get(f"{API}/saved-jobs", headers=auth_headers)

    assert response.status_code == 200
    items = response.json()
    assert [item["job"]["title"] for item in items] == ["Backend Engineer", "Sales Associate"]
    assert items[0]["saved_ago"] == "0h ago"
