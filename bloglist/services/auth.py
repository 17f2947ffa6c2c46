"""Authentication service issuing and resolving bearer tokens."""

from bloglist.db.database import Database
from bloglist.errors.auth import InvalidCredentialsError, UserNotFoundError
from bloglist.managers.password_manager import PasswordHasher
from bloglist.managers.token_manager import TokenManager
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import UserRepository
from bloglist.schemas.auth import LoginResponse

logger = get_logger(__name__)


class AuthService:
    """Service for handling user authentication."""

    def __init__(
        self,
        database: Database,
        hasher: PasswordHasher,
        token_manager: TokenManager,
    ) -> None:
        """
        Initialize the auth service.

        Args:
            database: Database handing out transactional sessions
            hasher: Password hasher used to verify credentials
            token_manager: Signer for issued tokens
        """
        self.database = database
        self.hasher = hasher
        self.token_manager = token_manager

    async def authenticate(self, username: str, password: str | None) -> UserDB:
        """
        Authenticate a user by username and password.

        Args:
            username: User username
            password: User password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        async with self.database.transaction() as session:
            user = await UserRepository(session).get_by_username(username)

        if not user or not password:
            # Equalize timing with the found-user path
            await self.hasher.dummy_verify_async()
            raise InvalidCredentialsError

        if not await self.hasher.verify_async(password, user.password_hash):
            raise InvalidCredentialsError

        return user

    async def login(self, username: str, password: str | None) -> LoginResponse:
        """
        Authenticate a user and issue a bearer token.

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.authenticate(username, password)
        token = self.token_manager.create_access_token(user.id, user.username)
        logger.info(f"User {user.username} logged in")
        return LoginResponse(token=token, username=user.username, name=user.name)

    async def resolve_identity(self, token: str) -> UserDB:
        """
        Resolve the user a bearer token was issued to.

        Args:
            token: Raw JWT

        Returns:
            UserDB: The token's user

        Raises:
            InvalidTokenError: If the token does not verify or lacks the user claim
            UserNotFoundError: If the user no longer exists
        """
        token_data = self.token_manager.decode(token)

        async with self.database.transaction() as session:
            user = await UserRepository(session).get_by_id(token_data.user_id)

        if not user:
            raise UserNotFoundError
        return user
