"""Verification of App Bridge session tokens (compact HS256 JWTs).

The embedded admin UI sends a short-lived token in the ``Authorization``
header of every request.  The token is signed with the app's shared
secret and its ``dest`` claim names the shop the request is made for.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlparse

from jose import JWTError, jwt

from shop_gate.result import Err, Ok, Result

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
_BEARER = "bearer"


@dataclass(frozen=True)
class SessionClaims:
    """Claims of a token that passed verification."""

    shop: str
    claims: dict[str, Any] = field(default_factory=dict)


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from a ``Bearer <token>`` header value.

    ``None`` for an absent or empty header, another scheme, or a bearer
    header that carries no token.
    """
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != _BEARER:
        return None
    token = token.strip()
    return token or None


def _shop_from_dest(dest: str) -> str | None:
    # ``dest`` is normally "https://<shop>.myshopify.com"; accept a bare domain too
    if "://" in dest:
        try:
            return urlparse(dest).hostname
        except ValueError:
            return None
    return dest.strip() or None


def verify_session_token(
    token: str,
    secret: str,
    *,
    audience: str | None = None,
    leeway: int = 0,
) -> Result[SessionClaims]:
    """Verify *token* and return the shop it was issued for.

    Only ``HS256`` is accepted; a token declaring any other algorithm is
    rejected even when its signature would verify under some key.  Time
    claims (``exp``, ``nbf``, ``iat``) are checked when present.  The
    audience is checked only when *audience* is given, and then a token
    without an ``aud`` claim is rejected.

    Never raises for a bad token: every failure comes back as
    :class:`Err` whose reason is for logging only.
    """
    check_aud = audience is not None
    options = {"verify_aud": check_aud, "require_aud": check_aud, "leeway": leeway}
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            audience=audience,
            options=options,
        )
    except JWTError as exc:
        return Err(f"token rejected: {exc}")

    dest = claims.get("dest")
    if not isinstance(dest, str) or not dest:
        return Err("token has no dest claim")

    shop = _shop_from_dest(dest)
    if not shop:
        return Err(f"cannot derive shop from dest {dest!r}")

    logger.debug("Session token verified for %s", shop)
    return Ok(SessionClaims(shop=shop, claims=claims))
