"""Notes API endpoints."""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..core.schemas.common import Envelope
from ..core.schemas.notes import (
    NoteCreate,
    NoteEnvelope,
    NoteListEnvelope,
    NoteUpdate,
    PinUpdate,
)
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import CurrentUser, get_current_user

router = APIRouter(tags=["notes"])


def get_note_service(session: AsyncSession = Depends(get_db_session)) -> NoteService:
    return NoteService(session)


@router.post("/add-note", response_model=NoteEnvelope)
async def add_note(
    request: NoteCreate,
    current_user: CurrentUser = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
):
    """Create a new note."""
    note = await note_service.create_note(current_user, request)
    return NoteEnvelope(error=False, note=note, message="Todo added successfully")


@router.put("/edit-note/{note_id}", response_model=NoteEnvelope)
async def edit_note(
    note_id: str,
    request: NoteUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
):
    """Update a note."""
    note = await note_service.update_note(note_id, current_user, request)
    return NoteEnvelope(error=False, note=note, message="Todo updated successfully")


@router.get("/get-all-notes", response_model=NoteListEnvelope)
async def get_all_notes(
    current_user: CurrentUser = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
):
    """List user notes, pinned first."""
    notes = await note_service.list_user_notes(current_user)
    return NoteListEnvelope(error=False, notes=notes, message="All todos retrived successfully")


@router.delete("/delete-note/{note_id}", response_model=Envelope)
async def delete_note(
    note_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
    settings: Settings = Depends(get_settings),
):
    """Delete a note."""
    await note_service.delete_note(note_id, current_user)
    # legacy clients were always sent error=true here, even on success
    return Envelope(error=settings.legacy_wire_format, message="Todo deleted")


@router.put("/update-note-pinned/{note_id}", response_model=NoteEnvelope)
async def update_note_pinned(
    note_id: str,
    request: Optional[PinUpdate] = Body(default=None),
    current_user: CurrentUser = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
):
    """Toggle the pinned flag. The body value is accepted but not used."""
    note = await note_service.toggle_pinned(note_id, current_user)
    return NoteEnvelope(error=False, note=note, message="Todo updated successfully")


@router.get("/search-notes", response_model=NoteListEnvelope)
async def search_notes(
    query: Optional[str] = Query(default=None),
    current_user: CurrentUser = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
):
    """Search notes by title or content."""
    notes = await note_service.search_notes(current_user, query)
    return NoteListEnvelope(error=False, notes=notes, message="matching notes found")
