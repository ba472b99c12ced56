"""Receiver for Shopify webhook deliveries."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Header, HTTPException, Request, Response, status

from shop_gate.dependencies import require_secret
from shop_gate.webhook.signature import verify_webhook_hmac

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webhooks"])


@router.post("/webhooks")
async def receive_webhook(
    request: Request,
    secret: str = Depends(require_secret),
    x_shopify_hmac_sha256: str | None = Header(default=None),
    x_shopify_topic: str | None = Header(default=None),
    x_shopify_shop_domain: str | None = Header(default=None),
) -> Response:
    """Authenticate a webhook delivery against its raw body.

    The body is read as bytes before anything else touches it and no body
    model is declared, so the HMAC covers exactly what came over the wire.
    """
    raw_body = await request.body()

    if not verify_webhook_hmac(raw_body, secret, x_shopify_hmac_sha256):
        logger.warning(
            "Rejected webhook: invalid HMAC (topic=%s, shop=%s)",
            x_shopify_topic,
            x_shopify_shop_domain,
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid HMAC",
        )

    logger.info(
        "Webhook accepted (topic=%s, shop=%s, %d bytes)",
        x_shopify_topic,
        x_shopify_shop_domain,
        len(raw_body),
    )
    return Response(status_code=status.HTTP_200_OK)
