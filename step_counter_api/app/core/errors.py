"""
Translation of exceptions into ``ErrorResponse`` bodies.

FastAPI's defaults render ``{"detail": ...}`` for HTTP errors and
HTTP 422 for validation failures.  The handlers registered here make
every failure look the same to clients: a JSON object with a
``message``, optional ``details`` and an ``errorCode``.  Validation
failures in the request body or query are reported as HTTP 400;
an id in the path that does not parse is reported as HTTP 404, like
any other unknown id.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..schemas.error import ErrorResponse


_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: "bad_request",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}

_PATH_LABELS = {
    "team_id": "Team",
    "counter_id": "Counter",
}


def error_body(message: str, details: Optional[str] = None, error_code: Optional[str] = None) -> Dict[str, Any]:
    """Serialise an ``ErrorResponse`` the way clients receive it."""
    return ErrorResponse(message=message, details=details, error_code=error_code).model_dump(
        by_alias=True, exclude_none=True
    )


def _format_location(loc) -> str:
    return ".".join(str(part) for part in loc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    error_code = _ERROR_CODES.get(exc.status_code, f"http_{exc.status_code}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail), error_code=error_code),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    path_errors = [err for err in errors if tuple(err.get("loc", ()))[:1] == ("path",)]
    if path_errors:
        # A path id that does not parse cannot name an existing resource.
        err = path_errors[0]
        label = _PATH_LABELS.get(err["loc"][-1], "Resource")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=error_body(f"{label} {err.get('input')} not found", error_code="not_found"),
        )
    problems = [f"{_format_location(err.get('loc', ()))}: {err.get('msg')}" for err in errors]
    logging.getLogger(__name__).info(
        "Rejected %s %s: %s", request.method, request.url.path, "; ".join(problems)
    )
    message = f"Invalid request: {problems[0]}" if problems else "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(message, details="; ".join(problems) or None, error_code="validation_error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
