"""User registration and login."""

import asyncio
import logging
import re
from dataclasses import dataclass
from typing import Protocol

from media_relay.domain.errors import (
    ConflictError,
    InvalidCredentials,
    ValidationError,
)
from media_relay.domain.models import UserAccount
from media_relay.services.upstream import call_upstream

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class UserRepository(Protocol):
    """Persistence interface for user accounts."""

    def get_by_email(self, email: str) -> UserAccount | None:
        """Return the account for an email, if present."""

    def create_user(
        self, email: str, password_hash: str, full_name: str
    ) -> UserAccount:
        """Create an account; raise ConflictError if the email is taken."""


class PasswordHasher(Protocol):
    """Interface for the password hashing primitive."""

    def hash(self, password: str) -> str:
        """Return a salted hash for the password."""

    def verify(self, password: str, password_hash: str) -> bool:
        """Return true when the password matches the hash."""

    def dummy_verify(self) -> None:
        """Spend the same time as a verify without a stored hash."""


@dataclass
class UserService:
    """Application service for account registration and login."""

    repository: UserRepository
    hasher: PasswordHasher
    database_timeout: float = 10.0

    async def register(
        self, email: str | None, password: str | None, full_name: str | None
    ) -> UserAccount:
        """Create a new account and return it."""
        if not email or not password or not full_name or not full_name.strip():
            raise ValidationError("Email, password and full name are required")
        normalized = _normalize_email(email)

        existing = await call_upstream(
            self.repository.get_by_email, normalized, timeout=self.database_timeout
        )
        if existing:
            raise ConflictError("User already exists")

        password_hash = await asyncio.to_thread(self.hasher.hash, password)
        account = await call_upstream(
            self.repository.create_user,
            normalized,
            password_hash,
            full_name.strip(),
            timeout=self.database_timeout,
        )
        logger.info("Registered user", extra={"user_id": str(account.id)})
        return account

    async def login(self, email: str | None, password: str | None) -> UserAccount:
        """Return the account when the credentials match."""
        if not email or not password:
            raise ValidationError("Email and password are required")
        normalized = _normalize_email(email)

        account = await call_upstream(
            self.repository.get_by_email, normalized, timeout=self.database_timeout
        )
        if account is None:
            await asyncio.to_thread(self.hasher.dummy_verify)
            raise InvalidCredentials()
        matches = await asyncio.to_thread(
            self.hasher.verify, password, account.password_hash
        )
        if not matches:
            raise InvalidCredentials()
        return account


def _normalize_email(email: str) -> str:
    """Validate the email shape and return its canonical form."""
    cleaned = email.strip().lower()
    if not EMAIL_PATTERN.match(cleaned):
        raise ValidationError("Invalid email format")
    return cleaned
