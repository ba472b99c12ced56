"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shop_gate import __version__
from shop_gate.config import Settings
from shop_gate.middleware import TrustedOriginGate
from shop_gate.session.router import router as session_router
from shop_gate.webhook.router import router as webhook_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings) -> FastAPI:
    """Build and return the :class:`FastAPI` application.

    Parameters
    ----------
    settings:
        Configuration built once at startup.  It is kept on
        ``app.state`` and handed to the routes through dependencies; the
        routes never read the environment themselves.
    """
    if not settings.secret_configured:
        logger.critical(
            "SHOPIFY_API_SECRET is not set: /webhooks and /api/ping will answer 500",
        )

    app = FastAPI(title="Shop Gate", version=__version__)
    app.state.settings = settings

    # ── CORS for the embedded admin UI ────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.trusted_origin],
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    # Added last so it runs first, ahead of CORS and routing.
    app.add_middleware(TrustedOriginGate, trusted_origin=settings.trusted_origin)

    # ── Routers ───────────────────────────────────────────────────
    app.include_router(webhook_router)
    app.include_router(session_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple liveness probe."""
        return {"status": "ok"}

    return app
