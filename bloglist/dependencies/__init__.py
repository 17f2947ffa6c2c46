# bloglist/dependencies/__init__.py

from bloglist.dependencies.dependencies import (
    AuthServiceDep,
    BlogServiceDep,
    ContextDep,
    IdentityDep,
    UserServiceDep,
    extract_token,
    get_context,
    get_identity,
)

__all__ = [
    "AuthServiceDep",
    "BlogServiceDep",
    "ContextDep",
    "IdentityDep",
    "UserServiceDep",
    "extract_token",
    "get_context",
    "get_identity",
]
