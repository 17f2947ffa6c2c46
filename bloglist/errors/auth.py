"""Authentication and authorization errors."""

from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    error_kind = "authentication_failed"

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class InvalidCredentialsError(UserAuthenticationError):
    """Raised when credentials are invalid."""

    error_kind = "invalid_credentials"

    def __init__(self) -> None:
        super().__init__("invalid username or password")


class InvalidTokenError(UserAuthenticationError):
    """Raised when a bearer token is missing, malformed or wrongly signed."""

    error_kind = "invalid_token"

    def __init__(self, detail: str = "token invalid") -> None:
        super().__init__(detail)


class UserNotFoundError(UserAuthenticationError):
    """Raised when a valid token names a user that no longer exists."""

    error_kind = "user_not_found"

    def __init__(self) -> None:
        super().__init__("user not found")


class UnauthorizedError(UserAuthenticationError):
    """Raised when an operation needs an identity and none was resolved."""

    error_kind = "unauthorized"

    def __init__(self, detail: str = "token missing") -> None:
        super().__init__(detail)


class ForbiddenError(BaseAppError):
    """Raised when the resolved identity does not own the resource."""

    error_kind = "forbidden"

    def __init__(self, detail: str = "forbidden") -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


auth_exception_handler = create_exception_handler(logger)
