# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# - supabase_client.py: Anonymous and user-scoped Supabase client factory
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError, error_payload

__all__ = [
    "SupabaseClient",
    "SupabaseClientError",
    "error_payload",
]
