"""
Password hashing module using Argon2 with passlib's CryptContext.

This module provides secure password hashing and verification using Argon2id,
which is considered one of the most secure password hashing algorithms available.
Verification goes through passlib, which compares digests in constant time.
"""

from fastapi.concurrency import run_in_threadpool
from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from bloglist.configs import CONFIG_MAP
from bloglist.configs.settings import SecurityLevel
from bloglist.errors import PasswordHashingError
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class PasswordHasher:
    """
    A secure password hashing and verification manager using Argon2id algorithm.

    This class wraps passlib's CryptContext to provide:
    - Secure password hashing with Argon2id
    - Password verification
    - Async variants that keep the event loop free while hashing
    """

    def __init__(self, level: SecurityLevel = "medium") -> None:
        """
        Initialize the PasswordHasher with Argon2id as the primary scheme.

        Args:
            level: Key into ``CONFIG_MAP`` selecting the Argon2 cost parameters.
        """
        self.level = level
        self.pwd_context = CryptContext(
            schemes=[
                "argon2",
                "pbkdf2_sha256",
            ],  # argon2 as primary, pbkdf2 for fallback
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=CONFIG_MAP[level].memory_cost,
            argon2__time_cost=CONFIG_MAP[level].time_cost,
            argon2__parallelism=CONFIG_MAP[level].parallelism,
        )
        logger.info(f"PasswordHasher initialized with Argon2id on level {self.level}")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails

        Example:
            >>> hasher = PasswordHasher()
            >>> hasher.hash("my_secure_password")  # $argon2id$v=19$m=65536,t=2,p=2$...
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg) from None

        try:
            hashed_password = self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Invalid password format")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e
        return hashed_password

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a plaintext password against a hashed password.

        Args:
            password: The plaintext password to verify
            hashed_password: The hashed password to verify against

        Returns:
            bool: True if password matches, False otherwise

        Example:
            >>> hasher = PasswordHasher()
            >>> hashed = hasher.hash("my_password")
            >>> hasher.verify("my_password", hashed)
            True
            >>> hasher.verify("wrong_password", hashed)
            False
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            logger.warning("Invalid hash format provided")
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False

    def dummy_verify(self) -> None:
        """Spend the same time as a real verification when no hash exists."""
        self.pwd_context.dummy_verify()

    async def hash_async(self, password: str) -> str:
        """Hash a password in the threadpool."""
        return await run_in_threadpool(self.hash, password)

    async def verify_async(self, password: str, hashed_password: str) -> bool:
        """Verify a password in the threadpool."""
        return await run_in_threadpool(self.verify, password, hashed_password)

    async def dummy_verify_async(self) -> None:
        """Run :meth:`dummy_verify` in the threadpool."""
        await run_in_threadpool(self.dummy_verify)
