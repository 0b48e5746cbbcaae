# =============================================================================
# core/services/catalog_service.py - Public Catalog Reads
# =============================================================================
# Categories, icons and prompts are shared reference data readable without
# signing in. They are fetched with the anonymous client and shaped here:
# - Categories are nested with their subcategories
# - Icons come from the default (ownerless) row, deduplicated
# - Prompts are returned as stored
# =============================================================================

import logging
from typing import Any, Iterable

from supabase import Client

from app.exceptions import BackendError
from lib.supabase_client import error_payload

logger = logging.getLogger(__name__)

CATEGORIES_TABLE = "categories"
SUBCATEGORIES_TABLE = "subcategories"
ICONS_TABLE = "icons"
PROMPTS_TABLE = "prompts"


# =============================================================================
# Pure Transforms
# =============================================================================

def nest_categories(
    categories: Iterable[dict[str, Any]] | None,
    subcategories: Iterable[dict[str, Any]] | None,
) -> list[dict[str, Any]]:
    """
    Attach each category's subcategories under a "subcategories" key.

    Subcategories keep their original order within a category. Ids are
    compared as strings, so a `parent` of "1" belongs to category 1. A
    subcategory whose `parent` matches no category is left out.

    Example:
        nest_categories([{"id": 1}], [{"id": 10, "parent": 1}, {"id": 12, "parent": 99}])
        # [{"id": 1, "subcategories": [{"id": 10, "parent": 1}]}]
    """
    by_parent: dict[str, list[dict[str, Any]]] = {}
    for sub in subcategories or []:
        by_parent.setdefault(str(sub.get("parent")), []).append(sub)

    return [
        {**category, "subcategories": by_parent.get(str(category.get("id")), [])}
        for category in categories or []
    ]


def default_icons(rows: Iterable[dict[str, Any]] | None) -> list[Any]:
    """
    Return the unique icons of the first row whose user_id is null.

    Rows with a user_id are per-user additions and are ignored, as are rows
    that lack the column entirely. Order of first appearance is kept.
    """
    base = next((row for row in rows or [] if "user_id" in row and row["user_id"] is None), None)
    if base is None:
        return []
    return list(dict.fromkeys(base.get("emojis") or []))


# =============================================================================
# Service
# =============================================================================

class CatalogService:
    """Service for public reference data."""

    @staticmethod
    def _select_all(client: Client, table: str) -> list[dict[str, Any]]:
        try:
            response = client.table(table).select("*").execute()
        except Exception as e:
            logger.error(f"Failed to read {table}: {e}")
            raise BackendError(f"select_{table}", error_payload(e)) from e
        return response.data or []

    @staticmethod
    def list_categories(client: Client) -> list[dict[str, Any]]:
        """
        Fetch categories and subcategories and nest them.

        Raises:
            BackendError: If either table cannot be read
        """
        categories = CatalogService._select_all(client, CATEGORIES_TABLE)
        subcategories = CatalogService._select_all(client, SUBCATEGORIES_TABLE)
        return nest_categories(categories, subcategories)

    @staticmethod
    def list_icons(client: Client) -> list[Any]:
        """Fetch the default icon set."""
        return default_icons(CatalogService._select_all(client, ICONS_TABLE))

    @staticmethod
    def list_prompts(client: Client) -> list[dict[str, Any]]:
        """Fetch all prompts."""
        return CatalogService._select_all(client, PROMPTS_TABLE)
