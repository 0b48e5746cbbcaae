# =============================================================================
# core/models/common.py - Shared Response Schemas
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """Acknowledgement returned by mutating endpoints."""
    success: bool = Field(default=True, examples=[True])


class ErrorResponse(BaseModel):
    """
    Error envelope for every 4xx/5xx produced by the gateway.

    `error` is a short message for auth failures, or the backend's own
    error payload relayed as-is.
    """
    error: Any = Field(..., examples=["Invalid token"])
