"""Security utilities."""

from .jwt import TokenCodec, get_token_codec
from .password import PasswordHasher, get_password_hasher

__all__ = [
    "PasswordHasher",
    "get_password_hasher",
    "TokenCodec",
    "get_token_codec",
]
