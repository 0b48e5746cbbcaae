# =============================================================================
# app/routers/profile.py - Profile & Account Endpoints
# =============================================================================
# Endpoints:
# - GET /profile: Get the caller's profile row
# - POST /profile: Create or overwrite the caller's profile
# - POST /user/delete: Flag the caller's account for deletion
# =============================================================================

from fastapi import APIRouter

from app.dependencies import CurrentUserDep, UserClientDep
from core.models.common import ErrorResponse, SuccessResponse
from core.models.profile import ProfileUpdate
from core.services.profile_service import ProfileService
from core.services.user_service import UserService

router = APIRouter(
    responses={
        400: {"model": ErrorResponse, "description": "Backend rejected the request"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
    },
)


@router.get("/profile", tags=["Profile"])
async def get_profile(user: CurrentUserDep, client: UserClientDep):
    """
    Get the caller's profile.

    A user without a profile row gets a 400, not a 404.
    """
    return ProfileService.get_profile(client, user.id)


@router.post("/profile", response_model=SuccessResponse, tags=["Profile"])
async def save_profile(
    body: ProfileUpdate,
    user: CurrentUserDep,
    client: UserClientDep,
):
    """Create or overwrite the caller's profile."""
    ProfileService.upsert_profile(client, user.id, body.name)
    return SuccessResponse()


@router.post("/user/delete", response_model=SuccessResponse, tags=["User"])
async def delete_user(user: CurrentUserDep, client: UserClientDep):
    """Mark the caller's account as deleted."""
    UserService.mark_deleted(client, user.id)
    return SuccessResponse()
