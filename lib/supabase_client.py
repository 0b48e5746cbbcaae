# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module owns every Supabase client the gateway creates:
# - One process-wide anonymous client (anon key, no user context) used for
#   public reads and for token introspection
# - One user-scoped client per authenticated request, carrying the caller's
#   bearer token so Row Level Security applies to every call it makes
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   client = SupabaseClient.get_client()
#   user_client = SupabaseClient.for_user(token)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import Client, ClientOptions, create_client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """
    Error while constructing a Supabase client.

    Raised for configuration problems, not for failed queries.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Factory for Supabase clients.

    The anonymous client is a singleton shared by all requests; it carries
    no per-user state. User-scoped clients are built fresh for each call
    to for_user() and are never cached.

    Example:
        rows = SupabaseClient.get_client().table("prompts").select("*").execute().data

        client = SupabaseClient.for_user(token)
        client.table("entries").delete().eq("id", entry_id).execute()
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the anonymous Supabase client.

        Returns:
            Client: Supabase client authenticated with the anon key only

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_ANON_KEY,
                )
                logger.info("Anonymous Supabase client initialized")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_ANON_KEY in your .env file",
                ) from e
        return cls._instance

    @classmethod
    def for_user(cls, token: str) -> Client:
        """
        Build a Supabase client that acts as the owner of `token`.

        The bearer token is sent on every PostgREST, RPC and Edge Function
        request made through the returned client. Construction does not
        touch the network.

        Args:
            token: Raw access token from the Authorization header

        Returns:
            Client: A new client; callers must not share it between requests
        """
        try:
            return create_client(
                settings.SUPABASE_URL,
                settings.SUPABASE_ANON_KEY,
                options=ClientOptions(
                    headers={"Authorization": f"Bearer {token}"},
                    auto_refresh_token=False,
                    persist_session=False,
                ),
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to create user-scoped Supabase client: {e}",
                code="USER_CLIENT_INIT_FAILED",
                suggestion="Check SUPABASE_URL and SUPABASE_ANON_KEY in your .env file",
            ) from e

    @classmethod
    def fetch_user(cls, token: str) -> Any | None:
        """
        Ask Supabase Auth who owns `token`.

        Args:
            token: Raw access token

        Returns:
            The Supabase user object, or None if the token maps to no user

        Raises:
            Exception: Whatever the auth client raises for a rejected token
        """
        response = cls.get_client().auth.get_user(token)
        if response is None:
            return None
        return response.user


def error_payload(error: Exception) -> Any:
    """
    Extract the backend's own error body from a failed Supabase call.

    PostgREST errors expose json(), Edge Function errors expose to_dict();
    anything else is relayed as its string form.
    """
    for attr in ("json", "to_dict"):
        method = getattr(error, attr, None)
        if callable(method):
            try:
                return method()
            except Exception:
                logger.debug(f"Could not read error body via {attr}()", exc_info=True)
    return str(error)
