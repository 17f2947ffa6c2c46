"""
Blog schemas for the Bloglist application.

Request bodies are accepted loosely (every field optional) and checked by
the blog service, so a missing field is reported as a domain validation
error naming the field instead of a generic request error.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from bloglist.configs.settings import MAX_AUTHOR_LENGTH, MAX_TITLE_LENGTH, MAX_URL_LENGTH

REQUIRED_BLOG_FIELDS: tuple[str, ...] = ("title", "author", "url")


class OwnerResponse(BaseModel):
    """Owner information joined into blog responses (never the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str


class BlogCreate(BaseModel):
    """Blog creation payload."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "React patterns",
                "author": "Michael Chan",
                "url": "https://reactpatterns.com/",
                "likes": 7,
            },
        },
    )

    title: str | None = Field(default=None, max_length=MAX_TITLE_LENGTH, description="Blog title")
    author: str | None = Field(default=None, max_length=MAX_AUTHOR_LENGTH, description="Author")
    url: str | None = Field(default=None, max_length=MAX_URL_LENGTH, description="Blog URL")
    likes: int | None = Field(default=None, description="Like count (defaults to 0)")

    def missing_fields(self) -> list[str]:
        """Return required fields that are absent or blank, in declaration order."""
        return [
            name
            for name in REQUIRED_BLOG_FIELDS
            if not (value := getattr(self, name)) or not value.strip()
        ]

    def normalized_likes(self) -> int:
        return self.likes or 0


class BlogUpdate(BlogCreate):
    """Full replacement payload; ``user`` optionally reassigns the owner."""

    user: UUID | None = Field(default=None, description="New owner ID")


class CommentCreate(BaseModel):
    """Comment payload."""

    comment: str = Field(..., description="Comment text", examples=["Great read!"])


class BlogResponse(BaseModel):
    """Blog with its owner populated."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    url: str
    likes: int
    comments: list[str] = []
    user: OwnerResponse


class BlogSummary(BaseModel):
    """Blog fields joined into user listings."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    url: str
