# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for authentication.
#
# Tokens are not verified locally. Each one is introspected with Supabase
# Auth (auth.get_user), so revoked sessions are rejected immediately.
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

import logging
from typing import Optional

from fastapi import Depends, Header

from app.auth.models import AuthUser
from app.exceptions import InvalidToken, Unauthenticated
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


async def get_bearer_token(
    authorization: Optional[str] = Header(default=None)
) -> str:
    """
    Extract the token from the Authorization header.

    Only a leading "Bearer " is stripped. A header with any other scheme is
    passed on whole, so Supabase Auth rejects it as an invalid token.

    Raises:
        Unauthenticated: 401 if the header is absent or carries no token
    """
    token = (authorization or "").removeprefix(BEARER_PREFIX).strip()
    if not token or token == BEARER_PREFIX.strip():
        raise Unauthenticated()
    return token


async def get_current_user(token: str = Depends(get_bearer_token)) -> AuthUser:
    """
    Validate the bearer token with Supabase Auth.

    A provider error is treated as a definitive rejection; nothing is
    retried.

    Returns:
        AuthUser: The authenticated user

    Raises:
        InvalidToken: 401 if Supabase reports an error or no user
    """
    try:
        user = SupabaseClient.fetch_user(token)
    except Exception as e:
        raise InvalidToken(reason=str(e)) from e

    if user is None:
        raise InvalidToken(reason="no user for token")

    logger.debug(f"Authenticated user: {user.id}")
    return AuthUser.from_supabase_user(user)
