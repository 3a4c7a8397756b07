"""
Counter endpoints for API v1.

Counters always live inside a team, so every route is nested under
``/teams/{team_id}/counters``.  An unknown team or counter id yields
HTTP 404 with a message naming the missing id.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status

from step_counter_api.app.api.deps import get_team_service
from step_counter_api.app.core.config import settings
from step_counter_api.app.schemas.counter import CounterCreate, CounterIncrement, CounterRead
from step_counter_api.app.schemas.error import ErrorResponse
from step_counter_api.app.services.team_service import NotFoundError, TeamService

router = APIRouter()

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Team or counter not found"}}
_INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid request body"}}


@router.get("", response_model=List[CounterRead], responses=_NOT_FOUND)
async def list_counters(team_id: UUID, service: TeamService = Depends(get_team_service)) -> List[CounterRead]:
    """Return all counters of a team in creation order."""
    try:
        counters = await service.list_counters(team_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return [CounterRead.model_validate(counter) for counter in counters]


@router.post(
    "",
    response_model=CounterRead,
    status_code=status.HTTP_201_CREATED,
    responses={**_INVALID, **_NOT_FOUND},
)
async def add_counter(
    team_id: UUID,
    counter_in: CounterCreate,
    response: Response,
    service: TeamService = Depends(get_team_service),
) -> CounterRead:
    """Create a counter with zero steps in an existing team."""
    try:
        counter = await service.add_counter(team_id, counter_in.name)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    response.headers["Location"] = f"{settings.api_prefix}/teams/{team_id}/counters/{counter.id}"
    return CounterRead.model_validate(counter)


@router.delete("/{counter_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_NOT_FOUND)
async def remove_counter(
    team_id: UUID,
    counter_id: UUID,
    service: TeamService = Depends(get_team_service),
) -> None:
    try:
        await service.remove_counter(team_id, counter_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None


@router.post(
    "/{counter_id}/increment",
    response_model=CounterRead,
    responses={**_INVALID, **_NOT_FOUND},
)
async def increment_counter(
    team_id: UUID,
    counter_id: UUID,
    increment: CounterIncrement,
    service: TeamService = Depends(get_team_service),
) -> CounterRead:
    """Add a positive number of steps to a counter and return it."""
    try:
        counter = await service.increment_counter(team_id, counter_id, increment.steps)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return CounterRead.model_validate(counter)
