"""
Origin policy middleware.

Starlette's ``CORSMiddleware`` rejects preflights from unknown origins,
which is not what the front-end deployments expect. This middleware is
permissive instead: an allow-listed ``Origin`` gets the CORS headers
echoed back, any other origin is served without them, and every
``OPTIONS`` request is answered with a bare 204.
"""

from __future__ import annotations

from typing import Dict, Iterable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

ALLOW_HEADERS = (
    "Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, "
    "Authorization, accept, origin, Cache-Control, X-Requested-With"
)
ALLOW_METHODS = "POST, OPTIONS, GET, PUT"


class OriginPolicyMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, allowed_origins: Iterable[str]) -> None:
        super().__init__(app)
        self.allowed_origins = frozenset(allowed_origins)

    def cors_headers(self, origin: str) -> Dict[str, str]:
        if origin not in self.allowed_origins:
            return {}
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Credentials": "true",
            "Access-Control-Allow-Headers": ALLOW_HEADERS,
            "Access-Control-Allow-Methods": ALLOW_METHODS,
        }

    async def dispatch(self, request: Request, call_next) -> Response:
        headers = self.cors_headers(request.headers.get("origin", ""))

        # Preflight never reaches a route, matched origin or not.
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=headers)

        response = await call_next(request)
        response.headers.update(headers)
        return response
