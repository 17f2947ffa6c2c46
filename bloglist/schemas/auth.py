from uuid import UUID

from pydantic import BaseModel, SecretStr


class LoginRequest(BaseModel):
    """Credentials posted to the login endpoint."""

    username: str
    password: SecretStr


class LoginResponse(BaseModel):
    """Token issued on successful login."""

    token: str
    username: str
    name: str


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    user_id: UUID
    username: str | None = None
