"""Authentication service implementation."""

from datetime import timedelta
from typing import Optional

from fastapi import status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import Settings, get_settings
from ...middleware.auth import CurrentUser
from ...security import PasswordHasher, TokenCodec
from ..errors import (
    AuthRequired,
    DuplicateEmail,
    InvalidCredentials,
    NotRegistered,
    ServerError,
    ValidationError,
)
from ..logging import get_logger
from ..repositories.user_repository import UserRepository
from ..schemas.auth import (
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)
from .interfaces import IAuthService

logger = get_logger("services.auth")


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(
        self,
        session: AsyncSession,
        settings: Optional[Settings] = None,
        codec: Optional[TokenCodec] = None,
        hasher: Optional[PasswordHasher] = None,
    ):
        self.session = session
        self.user_repo = UserRepository(session)
        self.settings = settings or get_settings()
        self.codec = codec or TokenCodec.from_settings(self.settings)
        self.hasher = hasher or PasswordHasher.from_settings(self.settings)

    async def register_user(self, request: RegisterRequest) -> RegisterResponse:
        """Register new user."""
        if not request.full_name:
            raise ValidationError("Name is required")
        if not request.email:
            raise ValidationError("email is required")
        if not request.password:
            raise ValidationError("password is required")

        try:
            if await self.user_repo.is_email_taken(request.email):
                logger.info("Registration rejected, email already in use")
                # older clients expect a 200 here and check the error flag
                raise DuplicateEmail(legacy_status_code=status.HTTP_200_OK)

            user = await self.user_repo.create_user({
                "full_name": request.full_name,
                "email": request.email,
                "password_hash": self.hasher.hash(request.password),
            })
        except SQLAlchemyError as exc:
            logger.error("Failed to register user", exc_info=exc)
            raise ServerError() from exc

        user_response = UserResponse.model_validate(user)
        access_token = self._issue_token(
            user_response, timedelta(minutes=self.settings.register_token_expire_minutes)
        )
        logger.info(f"Registered user {user.id}")

        return RegisterResponse(
            error=False,
            access_token=access_token,
            user=user_response,
            message="Registration Successfull",
        )

    async def authenticate_user(self, request: LoginRequest) -> LoginResponse:
        """Login user and return a JWT."""
        if not request.email:
            raise ValidationError("email is required")
        if not request.password:
            raise ValidationError("password is required")

        try:
            user = await self.user_repo.get_by_email(request.email)
        except SQLAlchemyError as exc:
            logger.error("Failed to load user for login", exc_info=exc)
            raise ServerError() from exc

        if not user:
            raise NotRegistered()

        if not self.hasher.verify(request.password, user.password_hash):
            logger.warning(f"Failed login for user {user.id}")
            raise InvalidCredentials()

        access_token = self._issue_token(
            UserResponse.model_validate(user),
            timedelta(minutes=self.settings.login_token_expire_minutes),
        )
        logger.info(f"User {user.id} logged in")

        return LoginResponse(
            error=False,
            message="Login successfull",
            email=request.email,
            access_token=access_token,
        )

    async def get_current_user(self, current: CurrentUser) -> CurrentUserResponse:
        """Get user by the ID carried in the token."""
        try:
            user = await self.user_repo.get_by_id(current.id)
        except SQLAlchemyError as exc:
            logger.error("Failed to load current user", exc_info=exc)
            raise ServerError() from exc

        # token still verifies but the account is gone
        if not user:
            raise AuthRequired("User not found")

        return CurrentUserResponse(user=UserResponse.model_validate(user), message="user found")

    def _issue_token(self, user: UserResponse, ttl: timedelta) -> str:
        payload = {"user": user.model_dump(mode="json", by_alias=True)}
        return self.codec.issue(payload, ttl)
