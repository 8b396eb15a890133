"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict

from fastapi import Depends
from jose import JWTError, jwt

from ..config import Settings, get_settings
from ..core.errors import InvalidToken, TokenExpired

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenCodec:
    """Signs and verifies stateless access tokens.

    Tokens are HMAC-signed JWTs carrying the caller's payload plus ``iat``,
    ``exp`` and ``type`` claims. Expiry is checked against the injected clock
    rather than by jose itself, so tests can move time around.
    """

    token_type = "access"

    def __init__(self, secret_key: str, algorithm: str = "HS256", clock: Clock = _utcnow):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.clock = clock

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenCodec":
        return cls(settings.secret_key, settings.algorithm)

    def issue(self, payload: Dict[str, Any], ttl: timedelta) -> str:
        """Create a signed token valid for ``ttl`` from now."""
        now = self.clock()
        to_encode = dict(payload)
        to_encode.update({
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
            "type": self.token_type,
        })
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        """Decode a token, raising InvalidToken or TokenExpired on failure."""
        try:
            claims = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            raise InvalidToken() from exc

        if claims.get("type") != self.token_type:
            raise InvalidToken()

        exp = claims.get("exp")
        if not isinstance(exp, (int, float)):
            raise InvalidToken()
        if self.clock().timestamp() >= exp:
            raise TokenExpired()

        return claims


def get_token_codec(settings: Settings = Depends(get_settings)) -> TokenCodec:
    """FastAPI dependency building the codec from the active settings."""
    return TokenCodec.from_settings(settings)

