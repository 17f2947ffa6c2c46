# bloglist/main.py

"""Bloglist Backend - multi-user blogging API."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from bloglist.configs import Settings, get_settings
from bloglist.errors import (
    DatabaseError,
    ForbiddenError,
    NotFoundError,
    PasswordHashingError,
    UserAuthenticationError,
    ValidationError,
    auth_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    validation_error_handler,
    validation_exception_handler,
)
from bloglist.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from bloglist.monitoring import configure_logging
from bloglist.routes import (
    auth_router,
    blog_router,
    health_router,
    testing_router,
    user_router,
)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Explicit settings; the cached environment settings when omitted.

    Returns:
        FastAPI: Configured application. The database is opened by its lifespan.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Multi-user blogging API",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        swagger_ui_parameters={
            "docExpansion": "none",
            "operationsSorter": "method",
        },
    )
    app.state.settings = settings

    configure_cors(app, settings)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)

    routes = [health_router, auth_router, user_router, blog_router]
    if settings.ENABLE_TESTING_ROUTES:
        routes.append(testing_router)

    _ = [app.include_router(router) for router in routes]

    errors = [
        (UserAuthenticationError, auth_exception_handler),
        (ForbiddenError, auth_exception_handler),
        (NotFoundError, database_exception_handler),
        (DatabaseError, database_exception_handler),
        (PasswordHashingError, password_hashing_exception_handler),
        (ValidationError, validation_error_handler),
        (RequestValidationError, validation_exception_handler),
    ]

    _ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

    return app


app = create_app()
