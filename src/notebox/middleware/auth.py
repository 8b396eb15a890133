"""Authentication middleware."""

from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from ..core.errors import AuthRequired, InvalidToken
from ..security.jwt import TokenCodec, get_token_codec


class CurrentUser(BaseModel):
    """Identity decoded from a verified token."""

    id: UUID
    full_name: Optional[str] = None
    email: Optional[str] = None


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication.

    Rejects with 401 when the header is missing, the scheme is not Bearer or
    the token does not verify. On success the decoded claims are stored on
    ``request.state.user``.
    """

    def __init__(self):
        # we raise our own 401s instead of FastAPI's default
        super(JWTBearer, self).__init__(auto_error=False)

    async def __call__(
        self, request: Request, codec: TokenCodec = Depends(get_token_codec)
    ) -> CurrentUser:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials or credentials.scheme.lower() != "bearer":
            raise AuthRequired()

        payload = codec.verify(credentials.credentials)

        user = payload.get("user")
        if not isinstance(user, dict):
            raise InvalidToken()
        try:
            user_id = UUID(str(user.get("_id")))
        except ValueError as exc:
            raise InvalidToken() from exc

        request.state.user = payload
        return CurrentUser(id=user_id, full_name=user.get("fullName"), email=user.get("email"))


jwt_bearer = JWTBearer()


# Dependency for getting the current user from the JWT
async def get_current_user(user: CurrentUser = Depends(jwt_bearer)) -> CurrentUser:
    """Get current authenticated user."""
    return user
