# =============================================================================
# app/routers/entries.py - Journal Entry Endpoints
# =============================================================================
# CRUD for the caller's journal entries. All endpoints require
# authentication and run against a user-scoped Supabase client.
#
# Endpoints:
# - POST /entries: Create an entry
# - PUT /entries/{entry_id}: Update an entry
# - GET /entries: List entries
# - DELETE /entries/{entry_id}: Delete an entry
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path

from app.dependencies import UserClientDep
from core.models.common import ErrorResponse, SuccessResponse
from core.services.entry_service import EntryService

router = APIRouter(
    responses={
        400: {"model": ErrorResponse, "description": "Backend rejected the request"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
    },
)

EntryBody = Annotated[
    dict[str, Any],
    Body(description="Entry fields, forwarded to the backend function unchanged"),
]


@router.post("/entries", response_model=SuccessResponse)
async def create_entry(entry: EntryBody, client: UserClientDep):
    """Create a journal entry."""
    EntryService.create_entry(client, entry)
    return SuccessResponse()


@router.put("/entries/{entry_id}", response_model=SuccessResponse)
async def update_entry(
    entry_id: Annotated[str, Path(description="Entry ID")],
    entry: EntryBody,
    client: UserClientDep,
):
    """
    Update a journal entry.

    The body must identify the entry itself; the path ID is not merged in.
    """
    EntryService.update_entry(client, entry_id, entry)
    return SuccessResponse()


@router.get("/entries")
async def list_entries(client: UserClientDep):
    """List the caller's entries as returned by the backend."""
    return EntryService.list_entries(client)


@router.delete("/entries/{entry_id}", response_model=SuccessResponse)
async def delete_entry(
    entry_id: Annotated[str, Path(description="Entry ID")],
    client: UserClientDep,
):
    """
    Delete a journal entry.

    Succeeds even if no row matched.
    """
    EntryService.delete_entry(client, entry_id)
    return SuccessResponse()
