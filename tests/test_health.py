"""
Tests for health, root and unknown-path handling.
"""

API = "/api/v1"


async def test_health(client):
    response = await client.get(f"{API}/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["checks"]["database"] == "healthy"
    assert data["checks"]["session_hub"] == "healthy"


async def test_root(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["name"] == "JobPortal API"


async def test_unknown_path(client):
    response = await client.get("/no/such/page")

    assert response.status_code == 404
    assert response.json()["error"] == "NOT_FOUND"


async def test_request_id_echoed(client):
    response = await client.get("/", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
