"""Shared fixtures for the shop-gate test suite."""

from __future__ import annotations

import time

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from shop_gate.app import create_app
from shop_gate.config import Settings

SECRET = "shhh"
TRUSTED_ORIGIN = "https://admin.shopify.com"
SHOP = "example-shop.myshopify.com"


def make_settings(**overrides) -> Settings:
    """Settings that ignore any local .env file."""
    values = {"shopify_api_secret": SECRET, "trusted_origin": TRUSTED_ORIGIN}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_token(secret: str = SECRET, algorithm: str = "HS256", **claims) -> str:
    """Mint a session token shaped like the ones App Bridge sends."""
    now = int(time.time())
    payload = {
        "iss": f"https://{SHOP}/admin",
        "dest": f"https://{SHOP}",
        "sub": "42",
        "iat": now,
        "nbf": now,
        "exp": now + 60,
    }
    payload.update(claims)
    return jwt.encode(payload, secret, algorithm=algorithm)


@pytest.fixture()
def settings() -> Settings:
    return make_settings()


@pytest.fixture()
def client(settings: Settings) -> TestClient:
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture()
def unconfigured_client() -> TestClient:
    with TestClient(create_app(make_settings(shopify_api_secret=None))) as c:
        yield c
