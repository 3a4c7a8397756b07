"""
FastAPI dependencies shared by the endpoint modules.

The team service is created once by ``create_app`` and kept on
``app.state``; handlers receive it through ``get_team_service``.
"""

from fastapi import Request

from ..services.team_service import TeamService


def get_team_service(request: Request) -> TeamService:
    return request.app.state.team_service
