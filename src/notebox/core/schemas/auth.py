"""
Authentication schemas.

Request fields are optional at the schema level so that a missing field is
reported by the service with a specific message instead of a generic
validation failure.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from .common import Envelope, WireModel


class RegisterRequest(WireModel):
    """User registration request schema."""

    full_name: Optional[str] = Field(default=None, description="Full name")
    email: Optional[str] = Field(default=None, description="Email, used to log in")
    password: Optional[str] = Field(default=None, description="User password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "fullName": "Ada Lovelace",
                "email": "ada@example.com",
                "password": "analytical-engine",
            }
        }
    )


class LoginRequest(WireModel):
    """User login request schema."""

    email: Optional[str] = Field(default=None, description="Registered email")
    password: Optional[str] = Field(default=None, description="User password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "ada@example.com",
                "password": "analytical-engine",
            }
        }
    )


class UserResponse(WireModel):
    """Public projection of a user; the password hash never leaves the service."""

    id: uuid.UUID = Field(alias="_id", description="User unique identifier")
    full_name: str = Field(description="Full name")
    email: str = Field(description="Email")
    created_on: datetime = Field(description="Account creation timestamp")


class RegisterResponse(Envelope):
    access_token: str = Field(description="JWT access token")
    user: UserResponse


class LoginResponse(Envelope):
    email: str
    access_token: str = Field(description="JWT access token")


class CurrentUserResponse(WireModel):
    """Body of GET /get-user."""

    user: UserResponse
    message: str
