"""Note repository for database operations.

Every single-note lookup filters on note id and owner id in the same
statement, so a note owned by someone else looks exactly like a missing one.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, delete, desc, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note

logger = logging.getLogger(__name__)


class NoteRepository:
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict) -> Note:
        """Create new note."""
        note = Note(**note_data)
        self.session.add(note)
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def get_by_id_and_user(self, note_id: UUID, user_id: UUID) -> Optional[Note]:
        """Get note by ID if owned by user."""
        stmt = select(Note).where(and_(Note.id == note_id, Note.user_id == user_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_note(self, note_id: UUID, user_id: UUID, update_data: dict) -> Optional[Note]:
        """Update note if owned by user."""
        note = await self.get_by_id_and_user(note_id, user_id)
        if not note:
            return None

        for key, value in update_data.items():
            setattr(note, key, value)

        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def toggle_pinned(self, note_id: UUID, user_id: UUID) -> Optional[Note]:
        """Flip the pinned flag of a note owned by user."""
        note = await self.get_by_id_and_user(note_id, user_id)
        if not note:
            return None

        note.toggle_pinned()
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def delete_note(self, note_id: UUID, user_id: UUID) -> bool:
        """Delete note if owned by user."""
        stmt = delete(Note).where(and_(Note.id == note_id, Note.user_id == user_id))
        result = await self.session.execute(stmt)
        await self.session.commit()

        if result.rowcount == 0:
            logger.warning(f"Note {note_id} not found or not owned by user {user_id}")
            return False

        logger.info(f"Deleted note {note_id}")
        return True

    async def list_user_notes(self, user_id: UUID) -> List[Note]:
        """List user notes, pinned first."""
        stmt = (
            select(Note)
            .where(Note.user_id == user_id)
            .order_by(desc(Note.is_pinned), Note.created_on)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def search_notes(self, user_id: UUID, query: str) -> List[Note]:
        """Case-insensitive substring search over title and content of user notes."""
        search_condition = or_(
            Note.title.icontains(query, autoescape=True),
            Note.content.icontains(query, autoescape=True),
        )
        stmt = (
            select(Note)
            .where(and_(Note.user_id == user_id, search_condition))
            .order_by(Note.created_on)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())
