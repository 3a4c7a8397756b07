"""
Pydantic models for counter data.

Counter names follow the same length rules as team names.  The
increment body only accepts a real JSON integer between 1 and the
largest 32‑bit signed value.
"""

from uuid import UUID

from pydantic import BaseModel, Field

from .team import NAME_MAX_LENGTH, NAME_MIN_LENGTH


MAX_INCREMENT = 2_147_483_647


class CounterCreate(BaseModel):
    """Schema for creating a counter inside a team."""

    name: str = Field(
        ...,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        examples=["Walk"],
        description="Counter name, 2 to 100 characters",
    )

    model_config = {
        "str_strip_whitespace": True,
    }


class CounterIncrement(BaseModel):
    """Schema for incrementing a counter."""

    steps: int = Field(..., ge=1, le=MAX_INCREMENT, strict=True, examples=[500])


class CounterRead(BaseModel):
    id: UUID
    name: str
    steps: int

    model_config = {
        "from_attributes": True,
    }
