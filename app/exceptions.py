# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every gateway error is rendered as {"error": ...}, which is the envelope
# the mobile client already parses.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class GatewayException(Exception):
    """
    Base exception for the gateway.

    `code` is for logs only; clients see `status_code` and the
    `{"error": ...}` body.
    """

    def __init__(
        self,
        message: str,
        code: str = "GATEWAY_ERROR",
        status_code: int = 500,
        error: Any = None,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.error = message if error is None else error
        self.headers = headers

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"error": self.error}


# =============================================================================
# Auth Exceptions
# =============================================================================

class Unauthenticated(GatewayException):
    """Raised when a protected route is called without a bearer token."""

    def __init__(self):
        super().__init__(
            message="Missing token",
            code="MISSING_TOKEN",
            status_code=401,
            headers={"WWW-Authenticate": "Bearer"},
        )


class InvalidToken(GatewayException):
    """Raised when Supabase Auth does not recognise the bearer token."""

    def __init__(self, reason: str | None = None):
        super().__init__(
            message="Invalid token",
            code="INVALID_TOKEN",
            status_code=401,
            headers={"WWW-Authenticate": "Bearer"},
        )
        self.reason = reason


# =============================================================================
# Backend Exceptions
# =============================================================================

class BackendError(GatewayException):
    """
    Raised when a table, RPC or Edge Function call fails.

    The backend's error payload is relayed to the client untouched.
    """

    def __init__(self, operation: str, error: Any):
        super().__init__(
            message=f"Backend operation failed: {operation}",
            code="BACKEND_ERROR",
            status_code=400,
            error=error,
        )
        self.operation = operation


# =============================================================================
# Exception Handlers
# =============================================================================

async def gateway_exception_handler(
    request: Request,
    exc: GatewayException
) -> JSONResponse:
    """Convert GatewayException to JSON response."""
    if exc.status_code == 401:
        reason = getattr(exc, "reason", None)
        logger.warning(
            f"{exc.code} on {request.method} {request.url.path}"
            + (f": {reason}" if reason else "")
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=exc.headers,
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "An unexpected error occurred"},
    )
