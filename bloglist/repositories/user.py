"""User repository for database operations."""

from typing import cast
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.sql.expression import ColumnElement

from bloglist.errors.database import DuplicateEntryError
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    This is the credential store: lookups by username or id, creation,
    and saving the blog back-reference list.
    """

    model = UserDB

    async def create(self, username: str, name: str, password_hash: str) -> UserDB:
        """
        Create a new user in the database.

        Args:
            username: Unique username
            name: Display name
            password_hash: Already-hashed password

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If username already exists
            DatabaseError: For other database errors
        """
        db_user = UserDB(username=username, name=name, password_hash=password_hash)
        try:
            return await self._add_and_refresh(db_user)
        except DuplicateEntryError as e:
            raise DuplicateEntryError(detail=f"Username '{username}' already exists") from e

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(cast(ColumnElement[bool], UserDB.username == username)),
        )
        return result.scalar_one_or_none()

    async def add_blog(self, user: UserDB, blog_id: UUID) -> UserDB:
        """Append ``blog_id`` to the user's back-reference list and save."""
        user.blogs = [*user.blogs, str(blog_id)]
        return await self.save(user)

    async def remove_blog(self, user: UserDB, blog_id: UUID) -> UserDB:
        """Drop ``blog_id`` from the user's back-reference list and save."""
        user.blogs = [ref for ref in user.blogs if ref != str(blog_id)]
        return await self.save(user)
