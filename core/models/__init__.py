# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# - common.py: Success and error envelopes
# - profile.py: Profile request body
# =============================================================================

from .common import ErrorResponse, SuccessResponse
from .profile import ProfileUpdate

__all__ = [
    "ErrorResponse",
    "ProfileUpdate",
    "SuccessResponse",
]
