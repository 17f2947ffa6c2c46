"""Database engine and session management."""

from asyncio import Lock
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from bloglist.configs import Settings
from bloglist.errors.base import BaseAppError
from bloglist.errors.database import DatabaseConnectionError, DatabaseInitializationError
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkout")
    def on_checkout(
        dbapi_connection: object,
        connection_record: object,
        connection_proxy: object,
    ) -> None:
        logger.debug("Connection checked out from pool")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


def _engine_kwargs(settings: Settings) -> dict[str, Any]:
    if settings.is_sqlite_memory:
        # One shared connection keeps in-memory databases alive across sessions
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    if settings.is_sqlite:
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": settings.POOL_SIZE,
        "max_overflow": settings.MAX_OVERFLOW,
        "pool_timeout": settings.POOL_TIMEOUT,
        "pool_recycle": settings.POOL_RECYCLE,
        "pool_pre_ping": True,
    }


class Database:
    """
    Owns the async engine and hands out transactional sessions.

    Nothing is connected until :meth:`init` runs, and :meth:`close`
    disposes every pooled connection.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._engine: AsyncEngine | None = None
        self._session_maker: async_sessionmaker[SQLModelAsyncSession] | None = None
        # SQLite has a single writer; sessions must not interleave on it
        self._write_lock: Lock | None = Lock() if settings.is_sqlite else None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            mssg = "Database is not initialized"
            raise RuntimeError(mssg)
        return self._engine

    async def init(self) -> None:
        """
        Create the engine and all tables defined in SQLModel models.

        Raises:
            DatabaseInitializationError: If the database cannot be reached.
        """
        self._engine = create_async_engine(
            self.settings.DATABASE_URL,
            echo=self.settings.DATABASE_ECHO,
            **_engine_kwargs(self.settings),
        )
        if self.settings.DEBUG:
            _configure_engine_events(self._engine)

        self._session_maker = async_sessionmaker(
            self._engine,
            class_=SQLModelAsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

        try:
            async with self._engine.begin() as conn:
                # Import all models to ensure they are registered
                from bloglist.models import BlogDB, UserDB  # noqa: F401, PLC0415

                await conn.run_sync(SQLModel.metadata.create_all)
        except Exception as e:
            logger.exception("Failed to initialize database")
            raise DatabaseInitializationError from e

        logger.info("Database initialized successfully!")

    async def close(self) -> None:
        """Dispose the engine and close all pooled connections."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_maker = None
            logger.info("Database connections closed")

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession]:
        """
        Context manager for explicit transaction management.

        Yields:
            AsyncSession: Database session within a transaction

        Example:
            ```python
            async with database.transaction() as session:
                session.add(UserDB(username="test", ...))
                # Commits on successful exit, rolls back on exception
            ```
        """
        if self._write_lock is None:
            async with self._session_scope() as session:
                yield session
            return

        async with self._write_lock, self._session_scope() as session:
            yield session

    @asynccontextmanager
    async def _session_scope(self) -> AsyncGenerator[AsyncSession]:
        if self._session_maker is None:
            mssg = "Database is not initialized"
            raise RuntimeError(mssg)

        async with self._session_maker() as session:
            try:
                yield session
                await session.commit()
            except BaseAppError:
                await session.rollback()
                raise
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Transaction error")
                raise DatabaseConnectionError(detail="Transaction failed") from e
