"""Custom validation error handling for FastAPI."""

from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_422_UNPROCESSABLE_CONTENT

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger
from bloglist.utils.helpers import host

logger = get_logger(__name__)


class ValidationError(BaseAppError):
    """Raised when a payload is missing required fields or names a missing record."""

    error_kind = "validation_error"

    def __init__(
        self,
        detail: str = "Validation Error",
        errors: list[dict] | None = None,
    ) -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)
        self.errors = errors or []

    @classmethod
    def for_fields(cls, fields: list[str], message: str = "field is required") -> "ValidationError":
        """Build an error that enumerates every offending field."""
        errors = [{"field": name, "message": message} for name in fields]
        return cls(detail=f"missing or empty: {', '.join(fields)}", errors=errors)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle Pydantic validation errors with cleaner response format.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)

    formatted_errors = []
    for error in exec_error.errors():
        formatted_error = {
            "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),  # Skip 'body'
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        # Convert non-serializable values (like ValueError) to strings
        if "ctx" in error:
            formatted_error["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in error["ctx"].items()
            }
        formatted_errors.append(formatted_error)

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_422_UNPROCESSABLE_CONTENT,
        content={
            "detail": "Validation failed",
            "kind": "request_validation_error",
            "errors": formatted_errors,
        },
    )


validation_error_handler = create_exception_handler(logger)
