"""
Top‑level router for version 1 of the API.

Counters are nested under their team, so the counters router carries
the ``{team_id}`` path parameter in its prefix.
"""

from fastapi import APIRouter

from .endpoints import counters, health, teams

router = APIRouter()

router.include_router(teams.router, prefix="/teams", tags=["teams"])
router.include_router(counters.router, prefix="/teams/{team_id}/counters", tags=["counters"])
router.include_router(health.router, prefix="/health", tags=["health"])
