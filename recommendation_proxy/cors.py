"""
CORS origin gate.

Decides per request whether a browser origin may call the API:
- No Origin header (curl, server-to-server, mobile apps): always allowed
- Origin in the allow-list, compared with and without a trailing slash
- Origin containing the hosting domain (e.g. "vercel.app"), so preview
  deployments with changing subdomains keep working

Everything else is rejected and logged.
"""

import logging
from typing import Iterable, Optional

from fastapi.datastructures import Headers
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)


class OriginGate:
    """Allow-list membership test for request origins."""

    def __init__(self, allowed_origins: Iterable[str], hosting_domain: Optional[str] = None):
        self.allowed_origins = frozenset(allowed_origins)
        self.hosting_domain = hosting_domain or None

    def allows(self, origin: Optional[str]) -> bool:
        if not origin:
            return True

        without_slash = origin[:-1] if origin.endswith("/") else origin
        with_slash = origin if origin.endswith("/") else f"{origin}/"

        if (
            origin in self.allowed_origins
            or without_slash in self.allowed_origins
            or with_slash in self.allowed_origins
        ):
            return True

        if self.hosting_domain and self.hosting_domain in origin:
            return True

        logger.warning(f"Blocked by CORS: {origin}")
        return False


class OriginGateMiddleware(CORSMiddleware):
    """
    Starlette CORSMiddleware driven by an OriginGate.

    Rejected simple requests are answered with 403 before they reach a route,
    so a blocked origin never triggers a provider call.
    """

    def __init__(self, app: ASGIApp, gate: OriginGate, rejection_message: str = "Not allowed by CORS"):
        super().__init__(
            app,
            allow_origins=sorted(gate.allowed_origins),
            allow_methods=["*"],
            allow_headers=["*"],
            allow_credentials=True,
        )
        self.gate = gate
        self.rejection_message = rejection_message

    def is_allowed_origin(self, origin: str) -> bool:
        return self.gate.allows(origin)

    async def simple_response(self, scope: Scope, receive: Receive, send: Send, request_headers: Headers) -> None:
        if not self.gate.allows(request_headers.get("origin")):
            response = JSONResponse(status_code=403, content={"error": self.rejection_message})
            await response(scope, receive, send)
            return
        await super().simple_response(scope, receive, send, request_headers=request_headers)
