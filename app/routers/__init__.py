# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - entries.py: Journal entry endpoints
# - profile.py: Profile and account endpoints
# - catalog.py: Public categories, icons and prompts
# - health.py: Health check endpoints
#
# Each router is mounted in main.py.
# =============================================================================

from . import catalog
from . import entries
from . import health
from . import profile

__all__ = [
    "catalog",
    "entries",
    "health",
    "profile",
]
