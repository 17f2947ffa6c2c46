"""Tests for application wiring: health, testing routes and middleware."""

from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr

from bloglist.configs import Settings
from bloglist.main import create_app
from tests.helpers import bearer, create_blog


async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_security_and_request_id_headers(client: AsyncClient) -> None:
    response = await client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Request-ID"] == "req-123"


async def test_unknown_endpoint(client: AsyncClient) -> None:
    response = await client.get("/api/unknown")

    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}


async def test_reset_wipes_everything(client: AsyncClient, token: str) -> None:
    await create_blog(client, token)

    response = await client.post("/api/testing/reset")

    assert response.status_code == 204
    assert (await client.get("/api/blogs")).json() == []
    assert (await client.get("/api/users")).json() == []
    assert (await client.get("/api/blogs", headers=bearer(token))).status_code == 401


async def test_testing_routes_disabled_by_default() -> None:
    app = create_app(
        Settings(
            ENVIRONMENT="test",
            DATABASE_URL="sqlite+aiosqlite:///:memory:",
            SECRET_KEY=SecretStr("test-secret"),
        ),
    )

    async with AsyncClient(base_url="http://test", transport=ASGITransport(app=app)) as ac:
        response = await ac.post("/api/testing/reset")

    assert response.status_code == 404
