# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# - GET /health: Process is up; reports version and environment
# - GET /health/ready: Every public catalog table answers the anonymous
#   client. Protected routes share the same Supabase project, so a failing
#   catalog read means the gateway cannot serve anything useful.
# =============================================================================

import logging

from fastapi import APIRouter
from pydantic import BaseModel

from app import __version__
from app.config import settings
from app.dependencies import AnonClientDep
from core.services.catalog_service import (
    CATEGORIES_TABLE,
    ICONS_TABLE,
    PROMPTS_TABLE,
    SUBCATEGORIES_TABLE,
)

logger = logging.getLogger(__name__)

router = APIRouter()

PUBLIC_TABLES = (CATEGORIES_TABLE, SUBCATEGORIES_TABLE, ICONS_TABLE, PROMPTS_TABLE)


class HealthResponse(BaseModel):
    status: str
    version: str
    environment: str


class ReadinessResponse(BaseModel):
    """`tables` maps each public table to "ok" or the read error."""
    status: str
    tables: dict[str, str]


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.ENVIRONMENT,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(client: AnonClientDep):
    """
    Read one row from each public table.

    Always answers 200; `status` is "degraded" when any read fails.
    """
    tables: dict[str, str] = {}
    for table in PUBLIC_TABLES:
        try:
            client.table(table).select("*").limit(1).execute()
            tables[table] = "ok"
        except Exception as e:
            logger.warning(f"Readiness read of {table} failed: {e}")
            tables[table] = str(e)[:80]

    ready = all(result == "ok" for result in tables.values())
    return ReadinessResponse(status="ready" if ready else "degraded", tables=tables)
