"""
Blog lifecycle service.

Applies the business rules over the blog store: identity checks for create,
update and delete, the ownership check for delete, payload validation and keeping
each user's blog back-references in step with blog ownership.
"""

from uuid import UUID

from bloglist.db.database import Database
from bloglist.errors.auth import ForbiddenError, UnauthorizedError
from bloglist.errors.database import NotFoundError
from bloglist.errors.validation import ValidationError
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.schemas.blog import BlogCreate, BlogResponse, BlogUpdate

logger = get_logger(__name__)


def _check_fields(payload: BlogCreate) -> None:
    if missing := payload.missing_fields():
        raise ValidationError.for_fields(missing)


class BlogService:
    """Service for the blog create/update/delete lifecycle."""

    def __init__(self, database: Database) -> None:
        """
        Initialize the blog service.

        Args:
            database: Database handing out transactional sessions
        """
        self.database = database

    async def list_all(self) -> list[BlogResponse]:
        """
        Get every blog with its owner populated.

        Returns:
            list[BlogResponse]: All blogs
        """
        async with self.database.transaction() as session:
            repo = BlogRepository(session)
            return await repo.populate_owners(await repo.get_all())

    async def get(self, blog_id: UUID) -> BlogResponse:
        """
        Get a single blog with its owner populated.

        Raises:
            NotFoundError: If the blog does not exist
        """
        async with self.database.transaction() as session:
            repo = BlogRepository(session)
            blog = await repo.get_by_id(blog_id)
            if not blog:
                raise NotFoundError(f"Blog with ID {blog_id} not found")
            (populated,) = await repo.populate_owners([blog])
        return populated

    async def create(self, identity: UserDB | None, payload: BlogCreate) -> BlogResponse:
        """
        Create a blog owned by ``identity``.

        The blog row and the owner's back-reference are written in one
        transaction.

        Args:
            identity: Resolved user or None
            payload: Blog fields

        Returns:
            BlogResponse: Created blog with owner populated

        Raises:
            UnauthorizedError: If no identity was resolved
            ValidationError: If title, author or url is missing or blank
        """
        if identity is None:
            raise UnauthorizedError
        _check_fields(payload)

        async with self.database.transaction() as session:
            users = UserRepository(session)
            owner = await users.get_by_id(identity.id)
            if not owner:
                raise NotFoundError(f"User with ID {identity.id} not found")

            repo = BlogRepository(session)
            blog = await repo.create(
                user_id=owner.id,
                title=payload.title or "",
                author=payload.author or "",
                url=payload.url or "",
                likes=payload.normalized_likes(),
            )
            await users.add_blog(owner, blog.id)
            (populated,) = await repo.populate_owners([blog])

        logger.info(f"Blog {blog.id} created by {owner.username}")
        return populated

    async def delete(self, identity: UserDB | None, blog_id: UUID) -> None:
        """
        Delete a blog owned by ``identity``.

        The owner's back-reference list is left as is.

        Raises:
            UnauthorizedError: If no identity was resolved
            NotFoundError: If the blog does not exist
            ForbiddenError: If the blog belongs to someone else
        """
        if identity is None:
            raise UnauthorizedError

        async with self.database.transaction() as session:
            repo = BlogRepository(session)
            blog = await repo.get_by_id(blog_id)
            if not blog:
                raise NotFoundError(f"Blog with ID {blog_id} not found")
            if blog.user_id != identity.id:
                raise ForbiddenError("This is not your blog")
            await repo.delete(blog_id)

        logger.info(f"Blog {blog_id} deleted by {identity.username}")

    async def update(
        self,
        identity: UserDB | None,
        blog_id: UUID,
        payload: BlogUpdate,
    ) -> BlogResponse:
        """
        Replace a blog's fields and optionally its owner.

        Any authenticated user may update any blog; ownership is not checked.

        Args:
            identity: Resolved user or None
            blog_id: Blog UUID
            payload: New field values

        Returns:
            BlogResponse: Updated blog with owner populated

        Raises:
            UnauthorizedError: If no identity was resolved
            ValidationError: If a field is missing, the blog does not exist,
                or ``user`` names an unknown user
        """
        if identity is None:
            raise UnauthorizedError
        _check_fields(payload)

        async with self.database.transaction() as session:
            repo = BlogRepository(session)
            users = UserRepository(session)

            current = await repo.get_by_id(blog_id)
            if not current:
                raise ValidationError(
                    f"Blog with ID {blog_id} does not exist",
                    [{"field": "id", "message": "blog does not exist"}],
                )
            previous_owner_id = current.user_id

            fields: dict = {
                "title": payload.title,
                "author": payload.author,
                "url": payload.url,
                "likes": payload.normalized_likes(),
            }
            new_owner = None
            if payload.user is not None and payload.user != previous_owner_id:
                new_owner = await users.get_by_id(payload.user)
                if not new_owner:
                    raise ValidationError(
                        f"User with ID {payload.user} does not exist",
                        [{"field": "user", "message": "user does not exist"}],
                    )
                fields["user_id"] = new_owner.id

            blog = await repo.update(blog_id, fields)
            if not blog:
                raise ValidationError(f"Blog with ID {blog_id} does not exist")

            if new_owner is not None:
                old_owner = await users.get_by_id(previous_owner_id)
                if old_owner:
                    await users.remove_blog(old_owner, blog.id)
                await users.add_blog(new_owner, blog.id)
                logger.info(f"Blog {blog.id} reassigned to {new_owner.username}")

            (populated,) = await repo.populate_owners([blog])
        return populated

    async def add_comment(self, blog_id: UUID, comment: str) -> BlogResponse:
        """
        Append a comment to a blog.

        Raises:
            NotFoundError: If the blog does not exist
        """
        async with self.database.transaction() as session:
            repo = BlogRepository(session)
            blog = await repo.append_comment(blog_id, comment)
            if not blog:
                raise NotFoundError(f"Blog with ID {blog_id} not found")
            (populated,) = await repo.populate_owners([blog])
        return populated

    async def reset(self) -> None:
        """Delete every blog and user."""
        async with self.database.transaction() as session:
            await BlogRepository(session).delete_all()
            await UserRepository(session).delete_all()
        logger.warning("Database reset: all blogs and users deleted")
