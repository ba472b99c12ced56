"""Session check endpoint for the embedded admin UI."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Header, HTTPException, status
from pydantic import BaseModel

from shop_gate.config import Settings
from shop_gate.dependencies import get_app_settings, require_secret
from shop_gate.result import Err
from shop_gate.session.token import extract_bearer_token, verify_session_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["session"])


class PingResponse(BaseModel):
    ok: bool = True
    shop: str


@router.get("/ping", response_model=PingResponse)
def ping(
    secret: str = Depends(require_secret),
    settings: Settings = Depends(get_app_settings),
    authorization: str | None = Header(default=None),
) -> PingResponse:
    """Return the shop named by a valid bearer session token."""
    token = extract_bearer_token(authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
        )

    result = verify_session_token(
        token,
        secret,
        audience=settings.shopify_api_key,
        leeway=settings.session_token_leeway,
    )
    if isinstance(result, Err):
        logger.warning("Rejected session token: %s", result.reason)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid session token",
        )

    return PingResponse(shop=result.value.shop)
