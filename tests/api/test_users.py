"""End-to-end tests for /api/users and /api/login."""

import pytest
from httpx import AsyncClient

from tests.helpers import BLOG, bearer, register


class TestRegister:
    async def test_created(self, client: AsyncClient) -> None:
        body = await register(client)

        assert body["username"] == "mluukkai"
        assert body["name"] == "Matti Luukkainen"
        assert body["blogs"] == []
        assert "password" not in body
        assert "password_hash" not in body

    @pytest.mark.parametrize(
        ("payload", "detail"),
        [
            ({"username": "root", "name": "Superuser"}, "password missing"),
            (
                {"username": "root", "name": "Superuser", "password": "ab"},
                "password must be at least 3 characters long",
            ),
            (
                {"username": "ro", "name": "Superuser", "password": "salainen"},
                "username must be at least 3 characters long",
            ),
            ({"username": "root", "password": "salainen"}, "name missing"),
        ],
    )
    async def test_invalid_payload(self, client: AsyncClient, payload: dict, detail: str) -> None:
        response = await client.post("/api/users", json=payload)

        assert response.status_code == 400
        assert response.json()["detail"] == detail
        assert (await client.get("/api/users")).json() == []

    async def test_duplicate_username(self, client: AsyncClient) -> None:
        await register(client)

        response = await client.post(
            "/api/users",
            json={"username": "mluukkai", "name": "Someone Else", "password": "secret"},
        )

        assert response.status_code == 409
        assert response.json()["kind"] == "duplicate_entry"
        assert len((await client.get("/api/users")).json()) == 1


class TestListUsers:
    async def test_lists_users_without_secrets(self, client: AsyncClient) -> None:
        await register(client)
        await register(client, username="hellas", name="Arto Hellas")

        response = await client.get("/api/users")

        assert response.status_code == 200
        assert {u["username"] for u in response.json()} == {"mluukkai", "hellas"}
        assert "password" not in response.text

    async def test_deleted_blogs_are_skipped(self, client: AsyncClient, token: str) -> None:
        created = await client.post("/api/blogs", json=BLOG, headers=bearer(token))
        await client.delete(f"/api/blogs/{created.json()['id']}", headers=bearer(token))

        users = (await client.get("/api/users")).json()

        assert users[0]["blogs"] == []


class TestLogin:
    async def test_success(self, client: AsyncClient, user: dict) -> None:
        response = await client.post(
            "/api/login",
            json={"username": "mluukkai", "password": "salainen"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "mluukkai"
        assert body["name"] == "Matti Luukkainen"
        assert body["token"]

    async def test_token_authorizes_create(self, client: AsyncClient, token: str) -> None:
        response = await client.post("/api/blogs", json=BLOG, headers=bearer(token))

        assert response.status_code == 201

    @pytest.mark.parametrize(
        ("username", "password"),
        [("mluukkai", "wrong"), ("nobody", "salainen")],
    )
    async def test_invalid_credentials(
        self,
        client: AsyncClient,
        user: dict,
        username: str,
        password: str,
    ) -> None:
        response = await client.post("/api/login", json={"username": username, "password": password})

        assert response.status_code == 401
        assert response.json() == {
            "detail": "invalid username or password",
            "kind": "invalid_credentials",
        }

    async def test_missing_password(self, client: AsyncClient) -> None:
        response = await client.post("/api/login", json={"username": "mluukkai"})

        assert response.status_code == 422
        assert response.json()["kind"] == "request_validation_error"
