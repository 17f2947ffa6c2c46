"""User service handling registration and listing."""

from uuid import UUID

from bloglist.configs import Settings
from bloglist.db.database import Database
from bloglist.errors.validation import ValidationError
from bloglist.managers.password_manager import PasswordHasher
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.schemas.blog import BlogSummary
from bloglist.schemas.user import UserCreate, UserResponse

logger = get_logger(__name__)


class UserService:
    """Registers users and lists them with their blogs."""

    def __init__(self, database: Database, hasher: PasswordHasher, settings: Settings) -> None:
        self.database = database
        self.hasher = hasher
        self.settings = settings

    def _validate(self, payload: UserCreate) -> str:
        password = payload.password.get_secret_value() if payload.password else ""
        if not password:
            raise ValidationError("password missing", [{"field": "password", "message": "password missing"}])
        if len(password) < self.settings.MIN_PASSWORD_LENGTH:
            mssg = f"password must be at least {self.settings.MIN_PASSWORD_LENGTH} characters long"
            raise ValidationError(mssg, [{"field": "password", "message": mssg}])

        errors = []
        username = (payload.username or "").strip()
        if not username:
            errors.append({"field": "username", "message": "username missing"})
        elif len(username) < self.settings.MIN_USERNAME_LENGTH:
            errors.append(
                {
                    "field": "username",
                    "message": f"username must be at least {self.settings.MIN_USERNAME_LENGTH} characters long",
                },
            )
        if not (payload.name or "").strip():
            errors.append({"field": "name", "message": "name missing"})
        if errors:
            raise ValidationError("; ".join(e["message"] for e in errors), errors)

        return password

    async def register(self, payload: UserCreate) -> UserResponse:
        """
        Register a new user.

        Args:
            payload: Registration data

        Returns:
            UserResponse: The created user with an empty blog list

        Raises:
            ValidationError: If a field is missing or too short
            DuplicateEntryError: If the username is taken
        """
        password = self._validate(payload)
        password_hash = await self.hasher.hash_async(password)

        async with self.database.transaction() as session:
            user = await UserRepository(session).create(
                username=(payload.username or "").strip(),
                name=(payload.name or "").strip(),
                password_hash=password_hash,
            )

        logger.info(f"User registered: {user.username}")
        return UserResponse(id=user.id, username=user.username, name=user.name, blogs=[])

    async def list_all(self) -> list[UserResponse]:
        """Every user with owned blogs populated; ids of deleted blogs are skipped."""
        async with self.database.transaction() as session:
            users = await UserRepository(session).get_all()
            blog_ids = {UUID(ref) for user in users for ref in user.blogs}
            blogs = {
                blog.id: blog for blog in await BlogRepository(session).get_by_ids(list(blog_ids))
            }

        return [self._to_response(user, blogs) for user in users]

    @staticmethod
    def _to_response(user: UserDB, blogs: dict) -> UserResponse:
        owned = [blogs[UUID(ref)] for ref in user.blogs if UUID(ref) in blogs]
        return UserResponse(
            id=user.id,
            username=user.username,
            name=user.name,
            blogs=[BlogSummary.model_validate(blog) for blog in owned],
        )
