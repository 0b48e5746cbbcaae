# =============================================================================
# core/services/profile_service.py - Profile Operations
# =============================================================================
# Reads and writes the caller's row in the profiles table.
# =============================================================================

import logging
from typing import Any

from supabase import Client

from app.exceptions import BackendError
from lib.supabase_client import error_payload

logger = logging.getLogger(__name__)

PROFILES_TABLE = "profiles"


class ProfileService:
    """Service for user profile operations."""

    @staticmethod
    def get_profile(client: Client, user_id: str) -> dict[str, Any]:
        """
        Fetch the profile row for `user_id`.

        A missing row surfaces from PostgREST as an error and is reported
        like any other backend failure.

        Raises:
            BackendError: If the select fails or matches no single row
        """
        try:
            response = (
                client.table(PROFILES_TABLE)
                .select("*")
                .eq("id", user_id)
                .single()
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to fetch profile for {user_id}: {e}")
            raise BackendError("get_profile", error_payload(e)) from e

        return response.data

    @staticmethod
    def upsert_profile(client: Client, user_id: str, name: str | None) -> None:
        """
        Create or overwrite the profile row for `user_id`.

        Raises:
            BackendError: If the upsert fails
        """
        try:
            client.table(PROFILES_TABLE).upsert({"id": user_id, "name": name}).execute()
        except Exception as e:
            logger.error(f"Failed to upsert profile for {user_id}: {e}")
            raise BackendError("upsert_profile", error_payload(e)) from e

        logger.info(f"Profile saved for user: {user_id}")
