"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

import logging

from fastapi import HTTPException, Request, status

from shop_gate.config import Settings

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Return the settings the application was built with."""
    return request.app.state.settings


def require_secret(request: Request) -> str:
    """Return the shared secret or fail the request with a 500."""
    settings = get_app_settings(request)
    if not settings.secret_configured:
        logger.error("Rejected %s: SHOPIFY_API_SECRET is not configured", request.url.path)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Missing SHOPIFY_API_SECRET",
        )
    return settings.shopify_api_secret
