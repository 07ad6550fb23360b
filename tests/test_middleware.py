"""Middleware tests — request ID, CORS, error handling."""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient


async def test_request_id_generated(client: AsyncClient) -> None:
    """Request ID is auto-generated when not provided."""
    response = await client.get("/health")
    assert "x-request-id" in response.headers
    assert len(response.headers["x-request-id"]) == 36  # UUID format


async def test_request_id_preserved(client: AsyncClient) -> None:
    """Custom request ID is echoed back in response."""
    response = await client.get("/health", headers={"X-Request-Id": "test-abc-123"})
    assert response.headers["x-request-id"] == "test-abc-123"


async def test_cors_preflight(client: AsyncClient) -> None:
    """CORS preflight is answered for browser clients."""
    response = await client.options(
        "/leaderboard",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert "access-control-allow-origin" in response.headers


async def test_404_returns_json_error(client: AsyncClient) -> None:
    """Unknown paths return 404 with an error body."""
    response = await client.get("/nonexistent-path")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


async def test_validation_error_is_400(client: AsyncClient) -> None:
    """Malformed bodies are rejected at the boundary with 400, not 422."""
    response = await client.post("/auth", json={"username": 42})
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Validation error"
    assert data["errors"][0]["loc"] == ["body", "username"]


async def test_non_json_body_is_400(client: AsyncClient) -> None:
    response = await client.post("/auth", content=b"not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert "error" in response.json()


async def test_500_returns_json(app: FastAPI) -> None:
    """Unhandled exceptions are turned into a JSON 500."""

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("kaboom")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/boom")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
