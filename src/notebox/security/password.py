"""Password hashing utilities."""

from fastapi import Depends
from passlib.context import CryptContext

from ..config import Settings, get_settings


class PasswordHasher:
    """Salted password hashing with a configurable bcrypt cost factor.

    Uses bcrypt_sha256, which pre-hashes with SHA-256 so passwords longer
    than bcrypt's 72-byte limit are not truncated.
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        self.context = CryptContext(
            schemes=["bcrypt_sha256"],
            deprecated="auto",
            bcrypt_sha256__rounds=rounds,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "PasswordHasher":
        return cls(rounds=settings.password_hash_rounds)

    def hash(self, password: str) -> str:
        """Hash a password with a random salt."""
        return self.context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return self.context.verify(plain_password, hashed_password)


def get_password_hasher(settings: Settings = Depends(get_settings)) -> PasswordHasher:
    """FastAPI dependency building the hasher from the active settings."""
    return PasswordHasher.from_settings(settings)

