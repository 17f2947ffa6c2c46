# bloglist/routes/user.py

"""User registration and listing routes."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from bloglist.dependencies import UserServiceDep
from bloglist.schemas import UserCreate, UserResponse

router = APIRouter(prefix="/api/users", tags=["👤 Users"])

USER_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "username": "mluukkai",
    "name": "Matti Luukkainen",
    "blogs": [
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "title": "React patterns",
            "author": "Michael Chan",
            "url": "https://reactpatterns.com/",
        },
    ],
}


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserResponse],
    summary="List users",
    description="Retrieve every user with their blogs populated.",
    responses={200: {"content": {"application/json": {"example": [USER_EXAMPLE]}}}},
    operation_id="users_list",
)
async def list_users(service: UserServiceDep) -> list[UserResponse]:
    """List all users."""
    return await service.list_all()


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    description="Register a user account. Password and username need at least 3 characters.",
    responses={
        201: {"content": {"application/json": {"example": {**USER_EXAMPLE, "blogs": []}}}},
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "password must be at least 3 characters long",
                        "kind": "validation_error",
                    },
                },
            },
        },
        409: {
            "description": "Conflict",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Username 'mluukkai' already exists",
                        "kind": "duplicate_entry",
                    },
                },
            },
        },
    },
    operation_id="users_register",
)
async def register_user(user: UserCreate, service: UserServiceDep) -> UserResponse:
    """
    Register a new user.

    Parameters
    ----------
    user : UserCreate
        Registration payload.
    service : UserService
        User service dependency.

    Returns
    -------
    UserResponse
        The created user.
    """
    return await service.register(user)
