"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import JSON, DateTime, Uuid
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    ``user_id`` is the owning user; it is the only edge used for
    authorization. ``comments`` is an append-only list of strings.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    user_id: UUID = Field(
        sa_column=Column(
            "user_id",
            Uuid,
            ForeignKey("users.id"),
            nullable=False,
            index=True,
        ),
        description="Owner ID (foreign key to users.id)",
    )

    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Blog title",
    )
    author: str = Field(
        sa_column=Column(String(100), nullable=False, index=True),
        description="Blog author as written by the poster",
    )
    url: str = Field(
        sa_column=Column(String(500), nullable=False),
        description="Blog URL",
    )
    likes: int = Field(
        default=0,
        nullable=False,
        description="Like count",
    )
    comments: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Comments in the order they were added",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC).replace(microsecond=0),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "React patterns",
                "author": "Michael Chan",
                "url": "https://reactpatterns.com/",
                "likes": 7,
                "comments": [],
            },
        },
    )
