# =============================================================================
# core/services/entry_service.py - Journal Entry Operations
# =============================================================================
# Entries are written and listed through Supabase Edge Functions, which own
# the entry schema. Deletes go straight to the entries table and rely on
# Row Level Security to restrict them to the caller's rows.
# =============================================================================

import json
import logging
from typing import Any

from supabase import Client
from supabase_functions.errors import FunctionsError

from app.exceptions import BackendError
from lib.supabase_client import error_payload

logger = logging.getLogger(__name__)

INSERT_ENTRY_FUNCTION = "insert_entry"
UPDATE_ENTRY_FUNCTION = "update_entry"
GET_ENTRIES_FUNCTION = "get_entries"
ENTRIES_TABLE = "entries"


def decode_function_body(raw: Any) -> Any:
    """
    Turn a raw Edge Function reply into the value relayed to the client.

    The sync functions client hands back only the body bytes, so JSON is
    recognised by parsing: an empty body becomes None, JSON is decoded,
    and anything else is returned as text.
    """
    if raw is None or isinstance(raw, (dict, list)):
        return raw
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else str(raw)
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


class EntryService:
    """Service for journal entry operations."""

    @staticmethod
    def _invoke(
        client: Client,
        function_name: str,
        body: dict[str, Any] | None = None,
    ) -> Any:
        # No responseType: a 2xx reply is never parsed by the client, so an
        # empty or plain-text success is still a success.
        invoke_options = {"body": body} if body is not None else None

        try:
            return client.functions.invoke(function_name, invoke_options=invoke_options)
        except FunctionsError as e:
            logger.error(f"Edge function {function_name} failed: {e}")
            raise BackendError(function_name, error_payload(e)) from e

    @staticmethod
    def create_entry(client: Client, entry: dict[str, Any]) -> None:
        """
        Create an entry via the insert_entry function.

        The body is forwarded without validation.

        Raises:
            BackendError: If the function reports an error
        """
        EntryService._invoke(client, INSERT_ENTRY_FUNCTION, entry)
        logger.info("Entry created")

    @staticmethod
    def update_entry(client: Client, entry_id: str, entry: dict[str, Any]) -> None:
        """
        Update an entry via the update_entry function.

        The function identifies the entry from the body; `entry_id` is only
        used for logging.

        Raises:
            BackendError: If the function reports an error
        """
        EntryService._invoke(client, UPDATE_ENTRY_FUNCTION, entry)
        logger.info(f"Entry updated: {entry_id}")

    @staticmethod
    def list_entries(client: Client) -> Any:
        """
        List the caller's entries via the get_entries function.

        Returns:
            The function's reply: decoded JSON, text, or None when empty
        """
        return decode_function_body(EntryService._invoke(client, GET_ENTRIES_FUNCTION))

    @staticmethod
    def delete_entry(client: Client, entry_id: str) -> None:
        """
        Delete an entry by ID.

        Deleting an ID that does not exist (or is not visible to the caller)
        is not an error.

        Raises:
            BackendError: If the delete is rejected
        """
        try:
            client.table(ENTRIES_TABLE).delete().eq("id", entry_id).execute()
        except Exception as e:
            logger.error(f"Failed to delete entry {entry_id}: {e}")
            raise BackendError("delete_entry", error_payload(e)) from e

        logger.info(f"Entry deleted: {entry_id}")
