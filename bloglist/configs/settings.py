"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Bloglist backend application.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
MAX_TITLE_LENGTH = 200
MAX_AUTHOR_LENGTH = 100
MAX_URL_LENGTH = 500
MAX_NAME_LENGTH = 100
MAX_USERNAME_LENGTH = 50

type SecurityLevel = Literal["low", "medium", "high"]


@dataclass(frozen=True)
class HashingConfig:
    """Argon2id cost parameters for one security level."""

    memory_cost: int
    time_cost: int
    parallelism: int


CONFIG_MAP: dict[str, HashingConfig] = {
    "low": HashingConfig(memory_cost=8 * 1024, time_cost=1, parallelism=1),
    "medium": HashingConfig(memory_cost=64 * 1024, time_cost=2, parallelism=2),
    "high": HashingConfig(memory_cost=512 * 1024, time_cost=2, parallelism=2),
}


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Bloglist Backend"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: Literal["development", "test", "staging", "production"] = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/bloglist.log"
    CORS_ORIGINS: list[str] = ["*"]

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./bloglist.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30
    POOL_RECYCLE: int = 1800

    # Authentication
    SECRET_KEY: SecretStr = SecretStr("change-me-in-production")
    ALGORITHM: str = "HS256"
    PASSWORD_SECURITY_LEVEL: SecurityLevel = "medium"
    MIN_PASSWORD_LENGTH: int = 3
    MIN_USERNAME_LENGTH: int = 3

    # Exposes /api/testing when enabled
    ENABLE_TESTING_ROUTES: bool = False

    @property
    def is_sqlite(self) -> bool:
        """Return True when the configured database is SQLite."""
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def is_sqlite_memory(self) -> bool:
        """Return True when the configured database is an in-memory SQLite database."""
        url = self.DATABASE_URL
        return self.is_sqlite and (":memory:" in url or "mode=memory" in url or url.endswith("://"))


@lru_cache
def get_settings() -> Settings:
    """Return the settings loaded from the environment."""
    return Settings()
