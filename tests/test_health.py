"""Smoke tests for health, status and the front-end fallback."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200, status ok and the case count."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["cases"] == 0


async def test_status_reports_port(client: AsyncClient) -> None:
    response = await client.get("/api/status")
    assert response.status_code == 200
    assert response.json() == {"status": "online", "port": 3001}


async def test_root_without_bundle_says_backend_running(client: AsyncClient) -> None:
    """No built front-end: 404 with an HTML page stating the API is up."""
    response = await client.get("/")
    assert response.status_code == 404
    assert "text/html" in response.headers.get("content-type", "")
    assert "Backend running on port 3001" in response.text


async def test_unknown_api_path_is_json_404(client: AsyncClient) -> None:
    response = await client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json()["error"] == "NOT_FOUND"
