"""Blog repository for database operations."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from bloglist.errors.database import DatabaseError
from bloglist.models.blog import BlogDB
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository
from bloglist.repositories.user import UserRepository
from bloglist.schemas.blog import BlogResponse, OwnerResponse

# Fields a replace-update may touch
UPDATABLE_FIELDS = frozenset({"title", "author", "url", "likes", "user_id"})


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    The store enforces no ownership rules; those live in the blog service.
    """

    model = BlogDB

    async def create(
        self,
        *,
        user_id: UUID,
        title: str,
        author: str,
        url: str,
        likes: int = 0,
    ) -> BlogDB:
        """
        Create a new blog in the database.

        Returns:
            BlogDB: Created blog database model

        Raises:
            DatabaseError: For database errors
        """
        db_blog = BlogDB(
            user_id=user_id,
            title=title,
            author=author,
            url=url,
            likes=likes,
            comments=[],
        )
        return await self._add_and_refresh(db_blog)

    async def update(self, blog_id: UUID, fields: dict[str, Any]) -> BlogDB | None:
        """
        Replace the given fields of a blog.

        Args:
            blog_id: Blog UUID
            fields: Field values to write

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        db_blog = await self.get_by_id(blog_id)
        if not db_blog:
            return None

        for key, value in fields.items():
            if key not in UPDATABLE_FIELDS:
                mssg = f"Field '{key}' cannot be updated"
                raise ValueError(mssg)
            setattr(db_blog, key, value)
        db_blog.updated_at = datetime.now(tz=UTC)

        return await self._add_and_refresh(db_blog)

    async def append_comment(self, blog_id: UUID, comment: str) -> BlogDB | None:
        """
        Append a comment to a blog.

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        db_blog = await self.get_by_id(blog_id)
        if not db_blog:
            return None

        db_blog.comments = [*db_blog.comments, comment]
        return await self._add_and_refresh(db_blog)

    async def populate_owners(self, blogs: list[BlogDB]) -> list[BlogResponse]:
        """
        Join each blog with its owner's public fields.

        Args:
            blogs: Blogs to populate

        Returns:
            list[BlogResponse]: Blogs in the same order with ``user`` resolved

        Raises:
            DatabaseError: If a blog references a user that does not exist
        """
        owner_ids = list({blog.user_id for blog in blogs})
        owners: dict[UUID, UserDB] = {}
        if owner_ids:
            owners = {
                user.id: user for user in await UserRepository(self.session).get_by_ids(owner_ids)
            }

        populated = []
        for blog in blogs:
            owner = owners.get(blog.user_id)
            if owner is None:
                mssg = f"Blog {blog.id} references missing user {blog.user_id}"
                raise DatabaseError(detail=mssg)
            populated.append(
                BlogResponse(
                    id=blog.id,
                    title=blog.title,
                    author=blog.author,
                    url=blog.url,
                    likes=blog.likes,
                    comments=list(blog.comments),
                    user=OwnerResponse.model_validate(owner),
                ),
            )
        return populated
