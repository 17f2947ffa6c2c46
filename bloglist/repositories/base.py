"""Base repository for database operations."""

from typing import cast
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import ColumnElement
from sqlmodel import SQLModel

from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
)
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing common CRUD operations.

    This class provides a generic implementation of database operations
    that is extended by the user and blog repositories.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(cast(ColumnElement[bool], id_column == record_id))
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_ids(self, record_ids: list[UUID]) -> list[ModelT]:
        """Get every record whose ID is in ``record_ids`` (missing IDs are skipped)."""
        if not record_ids:
            return []
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column.in_(record_ids))
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_all(self) -> list[ModelT]:
        """
        Get all records.

        Returns:
            list[ModelT]: List of records
        """
        result = await self.session.execute(select(self.model))
        return list(result.scalars().all())

    async def delete(self, record_id: UUID) -> bool:
        """
        Delete a record by ID.

        Args:
            record_id: Record UUID

        Returns:
            bool: True if record was deleted, False if not found
        """
        record = await self.get_by_id(record_id)
        if not record:
            return False

        await self.session.delete(record)
        await self.session.flush()
        return True

    async def delete_all(self) -> None:
        """Delete every record of this model."""
        await self.session.execute(delete(self.model))
        await self.session.flush()

    async def save(self, record: ModelT) -> ModelT:
        """Persist changes made to ``record`` and return it refreshed."""
        return await self._add_and_refresh(record)

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other database errors
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
            return record
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            logger.warning(f"Integrity error saving {self.model.__name__}: {error_msg}")
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError from e
            raise DatabaseError(detail="Database integrity error") from e
        except Exception as e:
            await self.session.rollback()
            logger.exception(f"Failed to save {self.model.__name__}")
            raise DatabaseConnectionError(detail="Failed to save record") from e
