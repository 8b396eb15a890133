"""Unit tests for the error taxonomy (notebox/core/errors.py)."""

import pytest

from notebox.core.errors import (
    AuthRequired,
    DuplicateEmail,
    InvalidToken,
    NoChanges,
    NotFound,
    ServerError,
    TokenExpired,
    ValidationError,
)


@pytest.mark.parametrize(
    "error_cls, status_code, message",
    [
        (NoChanges, 400, "No changes provided"),
        (DuplicateEmail, 409, "User already exists"),
        (AuthRequired, 401, "Authentication required"),
        (InvalidToken, 401, "Invalid token"),
        (TokenExpired, 401, "Token expired"),
        (NotFound, 404, "Todo not found"),
        (ServerError, 500, "Server error"),
    ],
)
def test_defaults(error_cls, status_code, message):
    exc = error_cls()

    assert exc.status_code == status_code
    assert exc.message == message
    assert str(exc) == message


def test_message_override():
    exc = ValidationError("title is required")

    assert exc.message == "title is required"
    assert exc.status_code == 400


def test_resolve_status_uses_legacy_code_only_when_asked():
    exc = NotFound(legacy_status_code=200)

    assert exc.resolve_status(legacy=True) == 200
    assert exc.resolve_status(legacy=False) == 404


def test_resolve_status_without_legacy_code():
    assert ServerError().resolve_status(legacy=True) == 500


def test_token_errors_are_auth_errors():
    assert issubclass(TokenExpired, InvalidToken)
    assert issubclass(InvalidToken, AuthRequired)
    assert issubclass(NoChanges, ValidationError)
