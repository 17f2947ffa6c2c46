# bloglist/routes/auth.py

"""Login route issuing bearer tokens."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from bloglist.dependencies import AuthServiceDep
from bloglist.schemas import LoginRequest, LoginResponse

router = APIRouter(prefix="/api/login", tags=["🔐 Auth"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=LoginResponse,
    summary="Login for a bearer token",
    description="Authenticate with username and password to obtain a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "invalid username or password",
                        "kind": "invalid_credentials",
                    },
                },
            },
        },
    },
    operation_id="auth_login",
)
async def login(credentials: LoginRequest, auth_service: AuthServiceDep) -> LoginResponse:
    """
    Login with username and password.

    Parameters
    ----------
    credentials : LoginRequest
        Username and password.
    auth_service : AuthService
        Authentication service.

    Returns
    -------
    LoginResponse
        Signed token with the user's username and name.
    """
    return await auth_service.login(
        credentials.username,
        credentials.password.get_secret_value(),
    )
