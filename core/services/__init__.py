# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .catalog_service import CatalogService, default_icons, nest_categories
from .entry_service import EntryService
from .profile_service import ProfileService
from .user_service import UserService

__all__ = [
    "CatalogService",
    "EntryService",
    "ProfileService",
    "UserService",
    "default_icons",
    "nest_categories",
]
