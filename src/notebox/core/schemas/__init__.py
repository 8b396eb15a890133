"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import (
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)
from .common import Envelope, WireModel
from .notes import (
    NoteCreate,
    NoteEnvelope,
    NoteListEnvelope,
    NoteResponse,
    NoteUpdate,
    PinUpdate,
)

__all__ = [
    # Auth schemas
    "RegisterRequest",
    "RegisterResponse",
    "LoginRequest",
    "LoginResponse",
    "UserResponse",
    "CurrentUserResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "PinUpdate",
    "NoteResponse",
    "NoteEnvelope",
    "NoteListEnvelope",
    # Common schemas
    "Envelope",
    "WireModel",
]
