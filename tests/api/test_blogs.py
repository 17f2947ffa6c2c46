"""End-to-end tests for the /api/blogs endpoints."""

from uuid import uuid4

from httpx import AsyncClient

from bloglist.context import AppContext
from tests.helpers import BLOG, bearer, create_blog


class TestListBlogs:
    async def test_empty(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs")

        assert response.status_code == 200
        assert response.json() == []

    async def test_owner_is_populated_without_secrets(
        self,
        client: AsyncClient,
        token: str,
        user: dict,
    ) -> None:
        await create_blog(client, token)

        response = await client.get("/api/blogs")

        assert response.status_code == 200
        blogs = response.json()
        assert len(blogs) == 1
        assert blogs[0]["user"] == {"id": user["id"], "username": "mluukkai", "name": "Matti Luukkainen"}
        assert "password_hash" not in response.text
        assert "passwordHash" not in response.text

    async def test_invalid_token_is_rejected(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs", headers=bearer("not-a-token"))

        assert response.status_code == 401
        assert response.json()["kind"] == "invalid_token"

    async def test_token_without_user_claim_is_rejected(
        self,
        client: AsyncClient,
        context: AppContext,
    ) -> None:
        token = context.token_manager.sign({"sub": "mluukkai", "id": str(uuid4())})

        response = await client.get("/api/blogs", headers=bearer(token))

        assert response.status_code == 401
        assert response.json()["detail"] == "token missing user claim"

    async def test_token_of_deleted_user(self, client: AsyncClient, token: str) -> None:
        reset = await client.post("/api/testing/reset")
        assert reset.status_code == 204

        response = await client.get("/api/blogs", headers=bearer(token))

        assert response.status_code == 401
        assert response.json()["kind"] == "user_not_found"


class TestGetBlog:
    async def test_by_id(self, client: AsyncClient, token: str) -> None:
        blog = await create_blog(client, token)

        response = await client.get(f"/api/blogs/{blog['id']}")

        assert response.status_code == 200
        assert response.json() == blog

    async def test_missing(self, client: AsyncClient) -> None:
        response = await client.get(f"/api/blogs/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["kind"] == "not_found"

    async def test_malformed_id(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs/12345")

        assert response.status_code == 422


class TestCreateBlog:
    async def test_created(self, client: AsyncClient, token: str) -> None:
        response = await client.post("/api/blogs", json=BLOG, headers=bearer(token))

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == BLOG["title"]
        assert body["likes"] == 7
        assert body["comments"] == []
        assert body["user"]["username"] == "mluukkai"

    async def test_likes_default_to_zero(self, client: AsyncClient, token: str) -> None:
        payload = {key: value for key, value in BLOG.items() if key != "likes"}

        response = await client.post("/api/blogs", json=payload, headers=bearer(token))

        assert response.status_code == 201
        assert response.json()["likes"] == 0

    async def test_missing_fields(self, client: AsyncClient, token: str) -> None:
        response = await client.post(
            "/api/blogs",
            json={"author": "Michael Chan", "title": ""},
            headers=bearer(token),
        )

        assert response.status_code == 400
        body = response.json()
        assert body["kind"] == "validation_error"
        assert [error["field"] for error in body["errors"]] == ["title", "url"]
        assert (await client.get("/api/blogs")).json() == []

    async def test_without_token(self, client: AsyncClient) -> None:
        response = await client.post("/api/blogs", json=BLOG)

        assert response.status_code == 401
        assert response.json()["kind"] == "unauthorized"
        assert (await client.get("/api/blogs")).json() == []

    async def test_non_bearer_scheme_counts_as_no_token(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/blogs",
            json=BLOG,
            headers={"Authorization": "Basic dXNlcjpwYXNz"},
        )

        assert response.status_code == 401
        assert response.json()["kind"] == "unauthorized"

    async def test_empty_bearer_counts_as_no_token(self, client: AsyncClient) -> None:
        listed = await client.get("/api/blogs", headers={"Authorization": "Bearer "})
        created = await client.post("/api/blogs", json=BLOG, headers={"Authorization": "Bearer "})

        assert listed.status_code == 200
        assert created.status_code == 401
        assert created.json()["kind"] == "unauthorized"

    async def test_appears_in_owner_listing(self, client: AsyncClient, token: str) -> None:
        blog = await create_blog(client, token)

        users = (await client.get("/api/users")).json()

        assert users[0]["blogs"] == [
            {"id": blog["id"], "title": BLOG["title"], "author": BLOG["author"], "url": BLOG["url"]},
        ]


class TestDeleteBlog:
    async def test_owner_deletes(self, client: AsyncClient, token: str) -> None:
        blog = await create_blog(client, token)

        response = await client.delete(f"/api/blogs/{blog['id']}", headers=bearer(token))

        assert response.status_code == 204
        assert (await client.get("/api/blogs")).json() == []

        again = await client.delete(f"/api/blogs/{blog['id']}", headers=bearer(token))
        assert again.status_code == 404

    async def test_non_owner_is_forbidden(
        self,
        client: AsyncClient,
        token: str,
        other_token: str,
    ) -> None:
        blog = await create_blog(client, token)

        response = await client.delete(f"/api/blogs/{blog['id']}", headers=bearer(other_token))

        assert response.status_code == 403
        assert response.json()["detail"] == "This is not your blog"
        assert (await client.get(f"/api/blogs/{blog['id']}")).status_code == 200

    async def test_without_token(self, client: AsyncClient, token: str) -> None:
        blog = await create_blog(client, token)

        response = await client.delete(f"/api/blogs/{blog['id']}")

        assert response.status_code == 401
        assert len((await client.get("/api/blogs")).json()) == 1


class TestUpdateBlog:
    async def test_any_authenticated_user_can_like(
        self,
        client: AsyncClient,
        token: str,
        other_token: str,
    ) -> None:
        blog = await create_blog(client, token)

        response = await client.put(
            f"/api/blogs/{blog['id']}",
            json={**BLOG, "likes": 8},
            headers=bearer(other_token),
        )

        assert response.status_code == 200
        assert response.json()["likes"] == 8
        assert response.json()["user"]["id"] == blog["user"]["id"]

    async def test_without_token(self, client: AsyncClient, token: str) -> None:
        blog = await create_blog(client, token)

        response = await client.put(f"/api/blogs/{blog['id']}", json={**BLOG, "likes": 99})

        assert response.status_code == 401
        assert response.json()["kind"] == "unauthorized"
        assert (await client.get(f"/api/blogs/{blog['id']}")).json()["likes"] == BLOG["likes"]

    async def test_missing_blog(self, client: AsyncClient, token: str) -> None:
        response = await client.put(f"/api/blogs/{uuid4()}", json=BLOG, headers=bearer(token))

        assert response.status_code == 400
        assert response.json()["kind"] == "validation_error"

    async def test_missing_fields(self, client: AsyncClient, token: str) -> None:
        blog = await create_blog(client, token)

        response = await client.put(
            f"/api/blogs/{blog['id']}",
            json={"likes": 3},
            headers=bearer(token),
        )

        assert response.status_code == 400
        assert (await client.get(f"/api/blogs/{blog['id']}")).json()["likes"] == BLOG["likes"]

    async def test_reassign_owner(
        self,
        client: AsyncClient,
        token: str,
        other_token: str,
    ) -> None:
        blog = await create_blog(client, token)
        users = {u["username"]: u for u in (await client.get("/api/users")).json()}

        response = await client.put(
            f"/api/blogs/{blog['id']}",
            json={**BLOG, "user": users["hellas"]["id"]},
            headers=bearer(token),
        )

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "hellas"

        # The new owner may now delete it, the old one may not
        forbidden = await client.delete(f"/api/blogs/{blog['id']}", headers=bearer(token))
        assert forbidden.status_code == 403
        deleted = await client.delete(f"/api/blogs/{blog['id']}", headers=bearer(other_token))
        assert deleted.status_code == 204



class TestComments:
    async def test_comments_are_appended(self, client: AsyncClient, token: str) -> None:
        blog = await create_blog(client, token)

        first = await client.post(f"/api/blogs/{blog['id']}/comments", json={"comment": "Great read!"})
        second = await client.post(f"/api/blogs/{blog['id']}/comments", json={"comment": "Agreed"})

        assert first.status_code == 201
        assert second.status_code == 201
        assert second.json()["comments"] == ["Great read!", "Agreed"]

    async def test_missing_blog(self, client: AsyncClient) -> None:
        response = await client.post(f"/api/blogs/{uuid4()}/comments", json={"comment": "hi"})

        assert response.status_code == 404

    async def test_missing_comment_body(self, client: AsyncClient, token: str) -> None:
        blog = await create_blog(client, token)

        response = await client.post(f"/api/blogs/{blog['id']}/comments", json={})

        assert response.status_code == 422
