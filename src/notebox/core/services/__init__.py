"""
Service layer interfaces and implementations.
"""

from .auth_service import AuthService
from .interfaces import IAuthService, INoteService
from .note_service import NoteService

__all__ = [
    # Interfaces
    "IAuthService",
    "INoteService",
    # Implementations
    "AuthService",
    "NoteService",
]
