"""User database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import JSON, DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class UserDB(SQLModel, table=True):
    """
    User database model.

    The ``blogs`` column is a back-reference list of blog ids kept for
    convenience listing. Ownership is decided by ``BlogDB.user_id`` alone.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )

    username: str = Field(
        sa_column=Column(String(50), unique=True, nullable=False, index=True),
        description="Username (unique, immutable)",
    )
    name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Display name",
    )
    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Salted password hash",
    )

    blogs: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Ids of blogs created by the user",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC).replace(microsecond=0),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "mluukkai",
                "name": "Matti Luukkainen",
                "blogs": [],
            },
        },
    )
