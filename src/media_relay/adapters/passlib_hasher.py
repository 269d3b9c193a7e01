"""Password hashing backed by passlib's bcrypt handler."""

from dataclasses import dataclass, field

from passlib.context import CryptContext

from media_relay.services.users import PasswordHasher


@dataclass
class BcryptPasswordHasher(PasswordHasher):
    """bcrypt hasher with a configurable work factor."""

    rounds: int = 12
    context: CryptContext = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=self.rounds
        )

    def hash(self, password: str) -> str:
        """Return a salted bcrypt hash."""
        return self.context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a password against a stored hash."""
        try:
            return self.context.verify(password, password_hash)
        except ValueError:
            # Unrecognised or corrupt stored hash.
            return False

    def dummy_verify(self) -> None:
        """Run a throwaway verification to equalise login timing."""
        self.context.dummy_verify()
