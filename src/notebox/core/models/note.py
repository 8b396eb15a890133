# Note model for user content
import uuid
from typing import List

from sqlalchemy import Boolean, ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID, StringListType


class Note(BaseModel):
    """A user's note. Ownership is fixed at creation."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    tags: Mapped[List[str]] = mapped_column(StringListType, nullable=False, default=list)
    is_pinned: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # owner reference; rows go away with the user via ON DELETE CASCADE
    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        Index("idx_notes_user_id", "user_id"),
        Index("idx_notes_user_pinned", "user_id", "is_pinned"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', user_id={self.user_id})>"

    def toggle_pinned(self) -> bool:
        """Flip the pinned flag and return the new value."""
        self.is_pinned = not self.is_pinned
        return self.is_pinned
