from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class PasswordHashingError(BaseAppError):
    """Base error for password hasher module."""

    error_kind = "password_hashing_error"

    def __init__(self, detail: str = "Password hashing failed") -> None:
        super().__init__(detail)


password_hashing_exception_handler = create_exception_handler(logger)
