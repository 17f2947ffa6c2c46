"""Tests for the Argon2 password hasher."""

from unittest.mock import patch

import pytest
from passlib.exc import InternalBackendError

from bloglist.errors import PasswordHashingError
from bloglist.managers import PasswordHasher


@pytest.fixture(scope="module")
def hasher() -> PasswordHasher:
    return PasswordHasher("low")


class TestHash:
    def test_hash_is_argon2_and_salted(self, hasher: PasswordHasher) -> None:
        first = hasher.hash("salainen")
        second = hasher.hash("salainen")

        assert first.startswith("$argon2id$")
        assert first != second
        assert "salainen" not in first

    def test_empty_password_raises(self, hasher: PasswordHasher) -> None:
        with pytest.raises(ValueError, match="empty"):
            hasher.hash("")

    def test_backend_failure_raises_hashing_error(self, hasher: PasswordHasher) -> None:
        with (
            patch.object(hasher.pwd_context, "hash", side_effect=InternalBackendError("boom")),
            pytest.raises(PasswordHashingError),
        ):
            hasher.hash("salainen")


class TestVerify:
    def test_correct_password(self, hasher: PasswordHasher) -> None:
        assert hasher.verify("salainen", hasher.hash("salainen"))

    def test_wrong_password(self, hasher: PasswordHasher) -> None:
        assert not hasher.verify("wrong", hasher.hash("salainen"))

    @pytest.mark.parametrize("stored", ["", "   ", "plaintext-not-a-hash"])
    def test_invalid_stored_hash(self, hasher: PasswordHasher, stored: str) -> None:
        assert not hasher.verify("salainen", stored)

    async def test_async_variants(self, hasher: PasswordHasher) -> None:
        hashed = await hasher.hash_async("salainen")

        assert await hasher.verify_async("salainen", hashed)
        assert not await hasher.verify_async("wrong", hashed)
