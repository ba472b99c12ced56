"""Process entry-point: load settings, configure logging, serve."""

from __future__ import annotations

import logging

import uvicorn

from shop_gate.app import create_app
from shop_gate.config import get_settings

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    """Configure root logger with a human-friendly format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s — %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main() -> None:
    """Entry-point: build the app from the environment and serve it."""
    settings = get_settings()
    _setup_logging(settings.log_level)

    app = create_app(settings)

    logger.info("Listening on http://localhost:%d/webhooks", settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
