"""
Team endpoints for API v1.

These routes create, list and delete teams and report the total
number of steps a team has collected across all of its counters.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status

from step_counter_api.app.api.deps import get_team_service
from step_counter_api.app.core.config import settings
from step_counter_api.app.models import Team
from step_counter_api.app.schemas.error import ErrorResponse
from step_counter_api.app.schemas.team import TeamCreate, TeamRead, TeamSteps
from step_counter_api.app.services.team_service import NotFoundError, TeamService

router = APIRouter()

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Team not found"}}
_INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid request body"}}


def _to_team_read(team: Team) -> TeamRead:
    return TeamRead(id=team.id, name=team.name, total_steps=TeamService.total_steps(team))


@router.get("", response_model=List[TeamRead])
async def list_teams(service: TeamService = Depends(get_team_service)) -> List[TeamRead]:
    """Return all teams with their total step counts."""
    teams = await service.list_teams()
    return [_to_team_read(team) for team in teams]


@router.post("", response_model=TeamRead, status_code=status.HTTP_201_CREATED, responses=_INVALID)
async def create_team(
    team_in: TeamCreate,
    response: Response,
    service: TeamService = Depends(get_team_service),
) -> TeamRead:
    """Create a new team.  New teams have no counters and zero steps."""
    team = await service.create_team(team_in.name)
    response.headers["Location"] = f"{settings.api_prefix}/teams/{team.id}"
    return _to_team_read(team)


@router.get("/{team_id}", response_model=TeamRead, responses=_NOT_FOUND)
async def get_team(team_id: UUID, service: TeamService = Depends(get_team_service)) -> TeamRead:
    """Retrieve a single team by its ID."""
    try:
        team = await service.get_team(team_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return _to_team_read(team)


@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_NOT_FOUND)
async def delete_team(team_id: UUID, service: TeamService = Depends(get_team_service)) -> None:
    """Delete a team and every counter it owns.

    Returns HTTP 404 if the team does not exist.
    """
    try:
        await service.delete_team(team_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None


@router.get("/{team_id}/steps", response_model=TeamSteps, responses=_NOT_FOUND)
async def get_team_total_steps(team_id: UUID, service: TeamService = Depends(get_team_service)) -> TeamSteps:
    """Return the sum of the steps of all counters in a team."""
    try:
        total = await service.team_total_steps(team_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return TeamSteps(team_id=team_id, total_steps=total)
