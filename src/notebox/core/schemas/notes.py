"""
Note management schemas.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field

from .common import Envelope, WireModel


class NoteCreate(WireModel):
    """Note creation request schema."""

    title: Optional[str] = Field(default=None, description="Note title")
    content: Optional[str] = Field(default=None, description="Note content")
    tags: Optional[List[str]] = Field(default=None, description="Extra tags")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy milk today",
                "content": "Semi-skimmed, two litres",
                "tags": ["errands"],
            }
        }
    )


class NoteUpdate(WireModel):
    """Note update request schema. Absent fields are left untouched."""

    title: Optional[str] = Field(default=None, description="New title; also resets tags")
    content: Optional[str] = Field(default=None, description="New content")
    is_pinned: Optional[bool] = Field(default=None, description="Pinned flag")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "New Plan",
                "isPinned": False,
            }
        }
    )


class PinUpdate(WireModel):
    """Body accepted by the pin toggle; the value is not used."""

    is_pinned: Optional[bool] = None


class NoteResponse(WireModel):
    """Note response schema."""

    id: uuid.UUID = Field(alias="_id", description="Note unique identifier")
    title: str
    content: str
    tags: List[str] = Field(default_factory=list)
    is_pinned: bool = False
    user_id: uuid.UUID = Field(description="Owner ID")
    created_on: datetime


class NoteEnvelope(Envelope):
    note: NoteResponse


class NoteListEnvelope(Envelope):
    notes: List[NoteResponse]
