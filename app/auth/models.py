# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthUser(BaseModel):
    """
    Authenticated user as reported by Supabase Auth.

    Lives for a single request. `id` is kept as the provider's string so it
    can be passed straight back to Supabase filters and RPC parameters.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    email: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_supabase_user(cls, user: Any) -> "AuthUser":
        """Build an AuthUser from the object returned by auth.get_user()."""
        return cls(
            id=str(user.id),
            email=getattr(user, "email", None),
            metadata=dict(getattr(user, "user_metadata", None) or {}),
        )
