"""
Service interfaces for the Notebox application.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ...middleware.auth import CurrentUser
from ..schemas.auth import CurrentUserResponse, LoginRequest, LoginResponse, RegisterRequest, RegisterResponse
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate


class IAuthService(ABC):
    """Auth service for user management."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> RegisterResponse:
        """Register new user and issue a short-lived token."""
        pass

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> LoginResponse:
        """Login user and issue a long-lived token."""
        pass

    @abstractmethod
    async def get_current_user(self, current: CurrentUser) -> CurrentUserResponse:
        """Re-read the authenticated user from the store."""
        pass


class INoteService(ABC):
    """Note service for owner-scoped CRUD and search."""

    @abstractmethod
    async def create_note(self, current: CurrentUser, request: NoteCreate) -> NoteResponse:
        """Create new note."""
        pass

    @abstractmethod
    async def update_note(self, note_id: str, current: CurrentUser, request: NoteUpdate) -> NoteResponse:
        """Update existing note."""
        pass

    @abstractmethod
    async def list_user_notes(self, current: CurrentUser) -> List[NoteResponse]:
        """List notes, pinned first."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: str, current: CurrentUser) -> bool:
        """Delete note."""
        pass

    @abstractmethod
    async def toggle_pinned(self, note_id: str, current: CurrentUser) -> NoteResponse:
        """Flip the pinned flag."""
        pass

    @abstractmethod
    async def search_notes(self, current: CurrentUser, query: Optional[str]) -> List[NoteResponse]:
        """Substring search over title and content."""
        pass
