"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from media_relay.domain.errors import ConflictError
from media_relay.domain.models import UserAccount
from media_relay.services.users import UserRepository

_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_email(self, email: str) -> UserAccount | None:
        """Return the user for an email, if present."""
        response = (
            self.client.table("users")
            .select("id, email, password_hash, full_name")
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return _to_account(response.data[0])
        return None

    def create_user(
        self, email: str, password_hash: str, full_name: str
    ) -> UserAccount:
        """Create a new user row; the unique index on email guards races."""
        try:
            response = (
                self.client.table("users")
                .insert(
                    {
                        "email": email,
                        "password_hash": password_hash,
                        "full_name": full_name,
                    }
                )
                .execute()
            )
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise ConflictError("User already exists") from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _to_account(response.data[0])


def _to_account(row: dict[str, object]) -> UserAccount:
    return UserAccount(
        id=UUID(str(row["id"])),
        email=str(row["email"]),
        password_hash=str(row["password_hash"]),
        full_name=str(row["full_name"]),
    )
