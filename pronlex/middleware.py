"""Security middleware — API key auth."""

from __future__ import annotations

import hmac
import logging
from typing import Callable

from fastapi import HTTPException, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from pronlex.config import settings

logger = logging.getLogger(__name__)

# Paths that never require auth
AUTH_EXEMPT_PATHS = frozenset({
    "/health",
    "/docs",
    "/openapi.json",
    "/redoc",
})


def _is_auth_exempt(path: str) -> bool:
    return path in AUTH_EXEMPT_PATHS


def verify_api_key(request: Request) -> None:
    """Verify the API key from the Authorization header.

    Only enforced when OS_API_KEY is set. Raises HTTPException on failure.
    """
    if not settings.os_api_key:
        return  # Auth disabled

    if _is_auth_exempt(request.url.path):
        return

    auth_header = request.headers.get("authorization", "")
    if auth_header.startswith("Bearer "):
        token = auth_header[7:].strip()
        if hmac.compare_digest(token, settings.os_api_key):
            return

    raise HTTPException(
        status_code=401,
        detail="Invalid or missing API key. Set Authorization: Bearer <key> header.",
    )


class SecurityMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            verify_api_key(request)
        except HTTPException as e:
            return JSONResponse(
                status_code=e.status_code,
                content={"error": {"message": e.detail}},
            )
        return await call_next(request)
