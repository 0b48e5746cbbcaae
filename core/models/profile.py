# =============================================================================
# core/models/profile.py - Profile Schemas
# =============================================================================
# Request body for saving the caller's profile. The profile row itself is
# returned to clients exactly as stored, so there is no response model.
# =============================================================================

from pydantic import BaseModel, Field


class ProfileUpdate(BaseModel):
    """
    Body of POST /profile.

    Example:
        {"name": "Ada"}
    """
    name: str | None = Field(
        default=None,
        description="Display name; null clears it",
        examples=["Ada"],
    )
