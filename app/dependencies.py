# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for Supabase clients.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends
from supabase import Client

from app.auth import AuthUser, get_bearer_token, get_current_user
from lib.supabase_client import SupabaseClient


def get_anon_client() -> Client:
    """
    Get the shared anonymous Supabase client.

    Used by public routes; it carries no user context.
    """
    return SupabaseClient.get_client()


def get_user_client(
    user: AuthUser = Depends(get_current_user),
    token: str = Depends(get_bearer_token),
) -> Client:
    """
    Build a Supabase client scoped to the caller.

    Depends on get_current_user so a client is only ever issued for a
    token Supabase Auth has accepted. A new client is created per request.
    """
    return SupabaseClient.for_user(token)


# Type aliases for dependency injection
AnonClientDep = Annotated[Client, Depends(get_anon_client)]
UserClientDep = Annotated[Client, Depends(get_user_client)]
CurrentUserDep = Annotated[AuthUser, Depends(get_current_user)]
