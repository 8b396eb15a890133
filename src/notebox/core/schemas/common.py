"""
Shared response schemas - the envelope every endpoint answers with
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for wire schemas: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Envelope(WireModel):
    """Standard response wrapper; ``error`` is the authoritative success flag."""

    error: bool = Field(default=False, description="Whether the request failed")
    message: str = Field(description="Human-readable outcome")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": True,
                "message": "title is required",
            }
        }
    )
