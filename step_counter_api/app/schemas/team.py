"""
Pydantic models for team data.

``TeamCreate`` validates the request body for creating a team.
``TeamRead`` is returned by the listing and creation endpoints and
carries the aggregated ``totalSteps`` rather than the counters
themselves; ``TeamSteps`` is the body of the dedicated total steps
endpoint.
"""

from uuid import UUID

from pydantic import BaseModel, Field


NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100


class TeamCreate(BaseModel):
    """Schema for creating a team."""

    name: str = Field(
        ...,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        examples=["Alpha"],
        description="Team name, 2 to 100 characters",
    )

    model_config = {
        "str_strip_whitespace": True,
    }


class TeamRead(BaseModel):
    """Schema for reading a team from the API."""

    id: UUID
    name: str
    total_steps: int = Field(0, alias="totalSteps")

    model_config = {
        "populate_by_name": True,
    }


class TeamSteps(BaseModel):
    """Total steps of a single team."""

    team_id: UUID = Field(..., alias="teamId")
    total_steps: int = Field(..., alias="totalSteps")

    model_config = {
        "populate_by_name": True,
    }
