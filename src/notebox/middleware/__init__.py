"""Middleware for authentication and other cross-cutting concerns."""

from .auth import CurrentUser, JWTBearer, get_current_user

__all__ = ["get_current_user", "CurrentUser", "JWTBearer"]
