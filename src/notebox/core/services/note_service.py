"""Note service implementation."""

from typing import Iterable, List, Optional
from uuid import UUID

from fastapi import status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ...middleware.auth import CurrentUser
from ..errors import NoChanges, NotFound, ServerError, ValidationError
from ..logging import get_logger
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from .interfaces import INoteService

logger = get_logger("services.notes")


def title_tags(title: str) -> List[str]:
    """Words of the title, deduplicated, in first-seen order."""
    return list(dict.fromkeys(title.split()))


def merge_tags(tags: Iterable[str], title: str) -> List[str]:
    """Caller tags followed by title words, deduplicated."""
    return list(dict.fromkeys([*tags, *title.split()]))


def parse_note_id(note_id: str) -> Optional[UUID]:
    try:
        return UUID(str(note_id))
    except ValueError:
        return None


class NoteService(INoteService):
    """Note service implementation.

    All lookups go through ``NoteRepository`` methods that take the owner id,
    so a note belonging to another user is indistinguishable from a missing one.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def create_note(self, current: CurrentUser, request: NoteCreate) -> NoteResponse:
        """Create new note, tagging it with the words of its title."""
        if not request.title:
            raise ValidationError("title is required")
        if not request.content:
            raise ValidationError("content is required")

        note_data = {
            "title": request.title,
            "content": request.content,
            "tags": merge_tags(request.tags or [], request.title),
            "user_id": current.id,
        }

        try:
            note = await self.note_repo.create_note(note_data)
        except SQLAlchemyError as exc:
            logger.error("Failed to create note", exc_info=exc)
            raise ServerError("Server Error", legacy_status_code=status.HTTP_200_OK) from exc

        logger.info(f"User {current.id} created note {note.id}")
        return NoteResponse.model_validate(note)

    async def update_note(self, note_id: str, current: CurrentUser, request: NoteUpdate) -> NoteResponse:
        """Update the supplied fields of an owned note.

        A new title replaces the tag set with the title's words; tags given
        at creation time are not carried over.
        """
        if not request.title and not request.content and request.is_pinned is None:
            raise NoChanges()

        update_data = {}
        if request.title:
            update_data["title"] = request.title
            update_data["tags"] = title_tags(request.title)
        if request.content:
            update_data["content"] = request.content
        if request.is_pinned is not None:
            update_data["is_pinned"] = request.is_pinned

        note = await self._with_store(
            self.note_repo.update_note, parse_note_id(note_id), current.id, update_data
        )
        if not note:
            raise NotFound()

        return NoteResponse.model_validate(note)

    async def list_user_notes(self, current: CurrentUser) -> List[NoteResponse]:
        """List user notes, pinned first."""
        try:
            notes = await self.note_repo.list_user_notes(current.id)
        except SQLAlchemyError as exc:
            logger.error("Failed to list notes", exc_info=exc)
            raise ServerError() from exc
        return [NoteResponse.model_validate(note) for note in notes]

    async def delete_note(self, note_id: str, current: CurrentUser) -> bool:
        """Delete note."""
        deleted = await self._with_store(self.note_repo.delete_note, parse_note_id(note_id), current.id)
        if not deleted:
            raise NotFound(legacy_status_code=status.HTTP_200_OK)
        return True

    async def toggle_pinned(self, note_id: str, current: CurrentUser) -> NoteResponse:
        """Flip the pinned flag of an owned note."""
        note = await self._with_store(self.note_repo.toggle_pinned, parse_note_id(note_id), current.id)
        if not note:
            raise NotFound()
        return NoteResponse.model_validate(note)

    async def search_notes(self, current: CurrentUser, query: Optional[str]) -> List[NoteResponse]:
        """Case-insensitive substring search over the user's notes."""
        if not query:
            raise ValidationError("Search query is required")

        try:
            notes = await self.note_repo.search_notes(current.id, query)
        except SQLAlchemyError as exc:
            logger.error("Failed to search notes", exc_info=exc)
            raise ServerError() from exc
        return [NoteResponse.model_validate(note) for note in notes]

    async def _with_store(self, operation, note_id: Optional[UUID], user_id: UUID, *args):
        """Run a single-note repository call; unparseable ids match nothing."""
        if note_id is None:
            return None
        try:
            return await operation(note_id, user_id, *args)
        except SQLAlchemyError as exc:
            logger.error(f"Store failure on note {note_id}", exc_info=exc)
            raise ServerError() from exc
