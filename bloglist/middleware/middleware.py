# bloglist/middleware/middleware.py
"""
Middleware components for the Bloglist API.

This module contains middleware for security headers, request logging and
CORS handling, plus the lifespan event handler that builds the application
context on startup and releases it on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from bloglist.configs import Settings
from bloglist.context import AppContext
from bloglist.monitoring import bind_request_id, clear_context, get_logger
from bloglist.utils.helpers import get_summary, host

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events."""
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting {app.title} ({settings.ENVIRONMENT})...")

    context = AppContext.build(settings)
    try:
        await context.open()
    except Exception:
        logger.exception("Failed to initialize services")
        raise
    app.state.context = context

    if settings.ENABLE_TESTING_ROUTES:
        logger.warning("Testing routes enabled: POST /api/testing/reset wipes the database")
    logger.info("Services initialized successfully")

    yield

    # Shutdown
    logger.info(f"Shutting down {app.title}...")
    try:
        await context.close()
        logger.info("Services cleaned up successfully")
    except Exception:
        logger.exception("Error during service cleanup")


def configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins = list(settings.CORS_ORIGINS)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        # Browsers reject credentials with a wildcard origin
        allow_credentials="*" not in allowed_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing information."""

        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        bind_request_id(request_id)

        start_time = perf_counter()
        summary = get_summary(request)

        route_info = summary or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}, from ip: {host(request)}")

        try:
            response = await call_next(request)
            duration = perf_counter() - start_time

            logger.info(
                f"Response: {response.status_code} for {request.method} {request.url.path} "
                f"in {duration:.2f}s",
            )
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            clear_context()


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to all responses."""

        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        if not request.app.state.settings.DEBUG:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response
