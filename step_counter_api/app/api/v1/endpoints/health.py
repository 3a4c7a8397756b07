"""
Health check endpoint for API v1.

Used by load balancers and container orchestrators to check that the
process is up.  It reports which store backs the service but does not
read from it.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

from step_counter_api.app.core.config import settings

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def health(request: Request) -> Dict[str, Any]:
    return {
        "service": settings.project_name,
        "version": settings.api_version,
        "status": "ok",
        "storage": type(request.app.state.store).__name__,
    }
