"""User schemas for registration and listing."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from bloglist.configs.settings import MAX_NAME_LENGTH, MAX_USERNAME_LENGTH
from bloglist.schemas.blog import BlogSummary


class UserCreate(BaseModel):
    """User registration payload."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
        },
    )

    username: str | None = Field(default=None, max_length=MAX_USERNAME_LENGTH)
    name: str | None = Field(default=None, max_length=MAX_NAME_LENGTH)
    password: SecretStr | None = None


class UserResponse(BaseModel):
    """Public user representation with owned blogs populated."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str
    blogs: list[BlogSummary] = []
