"""Server startup: build the gateway from settings and run uvicorn."""

from __future__ import annotations

import uvicorn

from codereview.config import Settings
from codereview.logging import get_logger
from codereview.review.gateway import ModelGateway
from codereview.server.app import create_app

logger = get_logger(__name__)


def start_server(settings: Settings) -> None:
    """Serve the review API on the configured host and port until stopped."""
    app = create_app(ModelGateway(settings))
    logger.info(
        "server.start: http=%s:%d model=%s",
        settings.host,
        settings.port,
        settings.openrouter_model,
    )
    # Logging is configured by setup_logging; keep uvicorn from replacing it.
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
