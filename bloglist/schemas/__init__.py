from bloglist.schemas.auth import LoginRequest, LoginResponse, TokenData
from bloglist.schemas.blog import (
    BlogCreate,
    BlogResponse,
    BlogSummary,
    BlogUpdate,
    CommentCreate,
    OwnerResponse,
)
from bloglist.schemas.user import UserCreate, UserResponse

__all__ = [
    "BlogCreate",
    "BlogResponse",
    "BlogSummary",
    "BlogUpdate",
    "CommentCreate",
    "LoginRequest",
    "LoginResponse",
    "OwnerResponse",
    "TokenData",
    "UserCreate",
    "UserResponse",
]
