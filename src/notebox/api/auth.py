"""Authentication API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..core.schemas.auth import (
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import CurrentUser, get_current_user
from ..security.jwt import TokenCodec, get_token_codec
from ..security.password import PasswordHasher, get_password_hasher

router = APIRouter(tags=["authentication"])


def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
    codec: TokenCodec = Depends(get_token_codec),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthService:
    return AuthService(session, settings=settings, codec=codec, hasher=hasher)


@router.post("/register", response_model=RegisterResponse)
async def register(request: RegisterRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Register a new user."""
    return await auth_service.register_user(request)


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Login user and get a JWT."""
    return await auth_service.authenticate_user(request)


@router.get("/get-user", response_model=CurrentUserResponse)
async def get_user(
    current_user: CurrentUser = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Get current user profile."""
    return await auth_service.get_current_user(current_user)
