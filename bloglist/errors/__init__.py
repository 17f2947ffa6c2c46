from bloglist.errors.auth import (
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTokenError,
    UnauthorizedError,
    UserAuthenticationError,
    UserNotFoundError,
    auth_exception_handler,
)
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    NotFoundError,
    database_exception_handler,
)
from bloglist.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from bloglist.errors.validation import (
    ValidationError,
    validation_error_handler,
    validation_exception_handler,
)

__all__ = [
    "BaseAppError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "NotFoundError",
    "PasswordHashingError",
    "UnauthorizedError",
    "UserAuthenticationError",
    "UserNotFoundError",
    "ValidationError",
    "auth_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "password_hashing_exception_handler",
    "validation_error_handler",
    "validation_exception_handler",
]
