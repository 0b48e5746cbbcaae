# =============================================================================
# core/services/user_service.py - Account Operations
# =============================================================================

import logging

from supabase import Client

from app.exceptions import BackendError
from lib.supabase_client import error_payload

logger = logging.getLogger(__name__)

MARK_USER_DELETED_RPC = "mark_user_deleted"


class UserService:
    """Service for account-level operations."""

    @staticmethod
    def mark_deleted(client: Client, user_id: str) -> None:
        """
        Flag the caller's account for deletion via the mark_user_deleted RPC.

        Raises:
            BackendError: If the RPC fails
        """
        try:
            client.rpc(MARK_USER_DELETED_RPC, {"uid": user_id}).execute()
        except Exception as e:
            logger.error(f"Failed to mark user {user_id} deleted: {e}")
            raise BackendError(MARK_USER_DELETED_RPC, error_payload(e)) from e

        logger.info(f"User marked deleted: {user_id}")
