"""Origin gate that keeps foreign browsers away from the handlers."""

from __future__ import annotations

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)


class TrustedOriginGate(BaseHTTPMiddleware):
    """Reject any request whose ``Origin`` is not the trusted origin.

    Requests without an ``Origin`` header (webhook deliveries, curl,
    server-to-server calls) pass through untouched.  Pre-flight requests
    are gated the same way, so ``CORSMiddleware`` only ever answers for
    the trusted origin.
    """

    def __init__(self, app, *, trusted_origin: str) -> None:
        super().__init__(app)
        self._trusted_origin = trusted_origin.rstrip("/")

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        if origin is not None and origin.rstrip("/") != self._trusted_origin:
            logger.warning(
                "Rejected %s %s from untrusted origin %s",
                request.method,
                request.url.path,
                origin,
            )
            return JSONResponse({"detail": "Origin not allowed"}, status_code=403)
        return await call_next(request)
