"""Centralised application settings loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings populated from environment / .env file."""

    # Shared secret used for webhook HMACs and session token signatures
    shopify_api_secret: str | None = None

    # Expected ``aud`` of session tokens; audience is not checked when unset
    shopify_api_key: str | None = None

    # Clock skew tolerated on exp / nbf / iat (seconds)
    session_token_leeway: int = 0

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3000

    # The single origin allowed to call us from a browser
    trusted_origin: str = "https://admin.shopify.com"

    # Logging
    log_level: str = "INFO"

    @property
    def secret_configured(self) -> bool:
        """``True`` when a non-empty shared secret is present."""
        return bool(self.shopify_api_secret)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Return a cached *Settings* instance."""
    return Settings()
