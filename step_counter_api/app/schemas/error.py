"""
Error body returned by every failing request.

``details`` and ``errorCode`` are omitted from the JSON when not set.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    message: str
    details: Optional[str] = None
    error_code: Optional[str] = Field(None, alias="errorCode")

    model_config = {
        "populate_by_name": True,
    }
