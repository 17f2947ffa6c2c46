# tests/helpers.py
"""Request helpers shared by the API tests."""

from httpx import AsyncClient

BLOG = {
    "title": "React patterns",
    "author": "Michael Chan",
    "url": "https://reactpatterns.com/",
    "likes": 7,
}


async def register(
    client: AsyncClient,
    username: str = "mluukkai",
    name: str = "Matti Luukkainen",
    password: str = "salainen",
) -> dict:
    response = await client.post(
        "/api/users",
        json={"username": username, "name": name, "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()


async def login(client: AsyncClient, username: str = "mluukkai", password: str = "salainen") -> str:
    response = await client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def create_blog(client: AsyncClient, token: str, **overrides: object) -> dict:
    response = await client.post("/api/blogs", json={**BLOG, **overrides}, headers=bearer(token))
    assert response.status_code == 201, response.text
    return response.json()
