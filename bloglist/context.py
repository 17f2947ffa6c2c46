"""Application context holding the per-lifespan collaborators."""

from dataclasses import dataclass

from bloglist.configs import Settings
from bloglist.db import Database
from bloglist.managers import PasswordHasher, TokenManager


@dataclass(slots=True)
class AppContext:
    """
    Everything a request needs that outlives the request.

    Built once when the application starts and stored on ``app.state``;
    the signing secret and the database engine live nowhere else.
    """

    settings: Settings
    database: Database
    hasher: PasswordHasher
    token_manager: TokenManager

    @classmethod
    def build(cls, settings: Settings) -> "AppContext":
        return cls(
            settings=settings,
            database=Database(settings),
            hasher=PasswordHasher(settings.PASSWORD_SECURITY_LEVEL),
            token_manager=TokenManager(settings.SECRET_KEY, settings.ALGORITHM),
        )

    async def open(self) -> None:
        """Connect to the database and create missing tables."""
        await self.database.init()

    async def close(self) -> None:
        await self.database.close()
