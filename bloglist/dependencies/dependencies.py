# bloglist/dependencies/dependencies.py

"""Application dependencies for services and request identity."""

from typing import Annotated

from fastapi import Depends, Request

from bloglist.context import AppContext
from bloglist.models import UserDB
from bloglist.services import AuthService, BlogService, UserService

BEARER_PREFIX = "bearer "


def extract_token(request: Request) -> str | None:
    """
    Read a bearer token from the ``Authorization`` header.

    Parameters
    ----------
    request : Request
        Incoming request.

    Returns
    -------
    str | None
        The raw token, or None when the header is absent, uses another scheme
        or carries an empty credential.
    """
    authorization = request.headers.get("Authorization")
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX) :].strip() or None


def get_context(request: Request) -> AppContext:
    """Return the context built by the application lifespan."""
    return request.app.state.context


ContextDep = Annotated[AppContext, Depends(get_context)]


def get_auth_service(context: ContextDep) -> AuthService:
    """Resolve the `AuthService` dependency."""
    return AuthService(context.database, context.hasher, context.token_manager)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


def get_blog_service(context: ContextDep) -> BlogService:
    """Resolve the `BlogService` dependency."""
    return BlogService(context.database)


BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]


def get_user_service(context: ContextDep) -> UserService:
    """Resolve the `UserService` dependency."""
    return UserService(context.database, context.hasher, context.settings)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]


async def get_identity(request: Request, auth_service: AuthServiceDep) -> UserDB | None:
    """
    Resolve the caller's identity when a bearer token is present.

    A request without a token proceeds anonymously; a request whose token
    fails verification is rejected.

    Parameters
    ----------
    request : Request
        Incoming request; the resolved user is stored on ``request.state.user``.
    auth_service : AuthService
        Service resolving tokens to users.

    Returns
    -------
    UserDB | None
        The resolved user, or None without a token.

    Raises
    ------
    InvalidTokenError
        If the token does not verify.
    UserNotFoundError
        If the token's user no longer exists.
    """
    token = extract_token(request)
    if token is None:
        request.state.user = None
        return None

    user = await auth_service.resolve_identity(token)
    request.state.user = user
    return user


IdentityDep = Annotated[UserDB | None, Depends(get_identity)]
