# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Journal Gateway API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.config import settings
from app.exceptions import (
    GatewayException,
    gateway_exception_handler,
    unhandled_exception_handler,
)
from app.routers import catalog, entries, health, profile
from lib.supabase_client import SupabaseClient

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: create the shared anonymous Supabase client
    - Shutdown: log only; user-scoped clients never outlive their request
    """
    logger.info(f"Starting Journal Gateway API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    SupabaseClient.get_client()

    yield

    logger.info("Shutting down Journal Gateway API")


# Create FastAPI application
app = FastAPI(
    title="Journal Gateway API",
    description="""
## Journal Gateway

Authenticates Supabase access tokens and forwards journaling requests to
Supabase tables, RPCs and Edge Functions.

Protected endpoints expect `Authorization: Bearer <access token>`.
Errors are returned as `{"error": ...}`.
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Entries",
            "description": "Create, update, list and delete journal entries",
        },
        {
            "name": "Profile",
            "description": "The caller's profile",
        },
        {
            "name": "User",
            "description": "Account lifecycle",
        },
        {
            "name": "Catalog",
            "description": "Public categories, icons and prompts",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(GatewayException)
async def handle_gateway_exception(request: Request, exc: GatewayException):
    """Handle gateway auth and backend errors."""
    return await gateway_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    return await unhandled_exception_handler(request, exc)


# =============================================================================
# Routers
# =============================================================================

app.include_router(entries.router, tags=["Entries"])
app.include_router(profile.router)
app.include_router(catalog.router, tags=["Catalog"])
app.include_router(health.router, tags=["Health"])
