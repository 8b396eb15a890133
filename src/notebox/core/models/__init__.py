"""
Database models for the Notebox application.

SQLAlchemy ORM models defining the schema:
    - User: account identified by email, with a password hash
    - Note: a user's note with tags and a pinned flag
"""

from .base import BaseModel
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
]
