# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator

from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr
from pytest import fixture

from bloglist.configs import Settings
from bloglist.context import AppContext
from bloglist.main import create_app
from tests.helpers import login, register


@fixture
def settings() -> Settings:
    return Settings(
        ENVIRONMENT="test",
        LOG_LEVEL="WARNING",
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        SECRET_KEY=SecretStr("test-secret"),
        PASSWORD_SECURITY_LEVEL="low",
        ENABLE_TESTING_ROUTES=True,
    )


@fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI]:
    application = create_app(settings)
    async with LifespanManager(application):
        yield application


@fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(base_url="http://test", transport=ASGITransport(app=app)) as ac:
        yield ac


@fixture
def context(app: FastAPI) -> AppContext:
    return app.state.context

@fixture
async def user(client: AsyncClient) -> dict:
    return await register(client)


@fixture
async def token(client: AsyncClient, user: dict) -> str:
    return await login(client)


@fixture
async def other_token(client: AsyncClient) -> str:
    await register(client, username="hellas", name="Arto Hellas", password="sekret")
    return await login(client, username="hellas", password="sekret")
