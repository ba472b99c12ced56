"""HMAC-SHA256 signature verification for incoming Shopify webhooks."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import logging

logger = logging.getLogger(__name__)


def _digest(payload: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).digest()


def compute_hmac(payload: bytes, secret: str) -> str:
    """Return the base64-encoded HMAC-SHA256 of *payload* under *secret*."""
    return base64.b64encode(_digest(payload, secret)).decode("ascii")


def verify_webhook_hmac(payload: bytes, secret: str, received_signature: str | None) -> bool:
    """Verify the ``X-Shopify-Hmac-Sha256`` header sent with a webhook.

    Parameters
    ----------
    payload:
        Raw request body bytes, exactly as received on the wire.
    secret:
        The app's shared secret.
    received_signature:
        Value of the ``X-Shopify-Hmac-Sha256`` header (base64).

    Returns
    -------
    bool
        ``True`` when the signature is valid.  A missing, empty or
        undecodable header is treated as invalid.
    """
    if not received_signature:
        logger.warning("Signature verification failed: no signature supplied")
        return False

    try:
        received = base64.b64decode(received_signature, validate=True)
    except (binascii.Error, ValueError):
        logger.warning("Signature verification failed: signature is not valid base64")
        return False

    expected = _digest(payload, secret)
    is_valid = hmac.compare_digest(expected, received)

    if not is_valid:
        logger.warning("Signature verification failed")

    return is_valid
