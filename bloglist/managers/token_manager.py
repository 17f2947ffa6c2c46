"""Token manager for signing and verifying bearer tokens."""

from typing import Any
from uuid import UUID

from jose import JWTError, jwt
from pydantic import SecretStr

from bloglist.errors import InvalidTokenError
from bloglist.schemas.auth import TokenData

# Claim holding the user id; shared by signing and verification
USER_ID_CLAIM = "user_id"


class TokenManager:
    """
    Signs and verifies stateless JWT bearer tokens.

    Tokens carry ``sub`` (username) and ``user_id`` claims and never expire;
    a token is valid as long as its signature checks out.
    """

    def __init__(self, secret_key: SecretStr, algorithm: str = "HS256") -> None:
        self._secret_key = secret_key
        self.algorithm = algorithm

    def sign(self, claims: dict[str, Any]) -> str:
        """
        Sign arbitrary claims.

        Args:
            claims: JSON-serializable claims to embed

        Returns:
            str: Encoded JWT
        """
        return jwt.encode(claims, self._secret_key.get_secret_value(), algorithm=self.algorithm)

    def create_access_token(self, user_id: UUID, username: str) -> str:
        """
        Create a new access token for a user.

        Args:
            user_id: User's UUID
            username: User's username

        Returns:
            str: Encoded JWT access token
        """
        return self.sign({"sub": username, USER_ID_CLAIM: str(user_id)})

    def decode(self, token: str | None) -> TokenData:
        """
        Decode and validate a JWT token.

        Args:
            token: JWT token string

        Returns:
            TokenData: Decoded token data

        Raises:
            InvalidTokenError: If the token is absent, badly signed or lacks the user claim
        """
        if not token:
            raise InvalidTokenError("token missing")

        try:
            payload = jwt.decode(
                token,
                self._secret_key.get_secret_value(),
                algorithms=[self.algorithm],
            )
        except JWTError as e:
            raise InvalidTokenError from e

        user_id = payload.get(USER_ID_CLAIM)
        if not user_id:
            raise InvalidTokenError("token missing user claim")

        try:
            return TokenData(user_id=UUID(str(user_id)), username=payload.get("sub"))
        except ValueError as e:
            raise InvalidTokenError("token user claim is malformed") from e
