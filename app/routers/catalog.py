# =============================================================================
# app/routers/catalog.py - Public Reference Data Endpoints
# =============================================================================
# No authentication; served from the shared anonymous Supabase client.
#
# Endpoints:
# - GET /categories: Categories with nested subcategories
# - GET /icons: Default icon set
# - GET /prompts: Writing prompts
# =============================================================================

from typing import Any

from fastapi import APIRouter

from app.dependencies import AnonClientDep
from core.models.common import ErrorResponse
from core.services.catalog_service import CatalogService

router = APIRouter(
    responses={400: {"model": ErrorResponse, "description": "Backend rejected the request"}},
)


@router.get("/categories", response_model=list[dict[str, Any]])
async def list_categories(client: AnonClientDep):
    """Get all categories, each with a `subcategories` list."""
    return CatalogService.list_categories(client)


@router.get("/icons", response_model=list[Any])
async def list_icons(client: AnonClientDep):
    """Get the unique icons of the default icon set."""
    return CatalogService.list_icons(client)


@router.get("/prompts", response_model=list[dict[str, Any]])
async def list_prompts(client: AnonClientDep):
    """Get all prompts."""
    return CatalogService.list_prompts(client)
