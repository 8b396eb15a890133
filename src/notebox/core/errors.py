"""
Application error taxonomy.

Services raise these; the exception handlers registered in ``main`` turn
them into ``{"error": true, "message": ...}`` envelopes. ``legacy_status_code``
is the status older clients were served for the same failure and is used
when ``Settings.legacy_wire_format`` is enabled.
"""

from typing import Optional

from fastapi import status


class NoteboxError(Exception):
    """Base class for errors rendered as JSON envelopes."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error"

    def __init__(self, message: Optional[str] = None, legacy_status_code: Optional[int] = None):
        self.message = message or self.message
        self.legacy_status_code = legacy_status_code
        super().__init__(self.message)

    def resolve_status(self, legacy: bool) -> int:
        """Status code to send, honouring the legacy wire format if asked."""
        if legacy and self.legacy_status_code is not None:
            return self.legacy_status_code
        return self.status_code


class ValidationError(NoteboxError):
    """A required field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class NoChanges(ValidationError):
    message = "No changes provided"


class DuplicateEmail(NoteboxError):
    status_code = status.HTTP_409_CONFLICT
    message = "User already exists"


class NotRegistered(NoteboxError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Not registered"


class InvalidCredentials(NoteboxError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid credentials"


class AuthRequired(NoteboxError):
    """No usable credentials on the request, or the account is gone."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication required"


class InvalidToken(AuthRequired):
    message = "Invalid token"


class TokenExpired(InvalidToken):
    message = "Token expired"


class NotFound(NoteboxError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Todo not found"


class ServerError(NoteboxError):
    """The store failed while serving the request."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error"
