"""FastAPI application factory for the code review API."""

from __future__ import annotations

from fastapi import FastAPI

from codereview.review.gateway import ModelGateway
from codereview.server.routes.health import health_router
from codereview.server.routes.review import review_router


def create_app(gateway: ModelGateway) -> FastAPI:
    """Create and configure the FastAPI application.

    Stores the gateway on app.state for access by route handlers,
    and includes the review and health routers.
    """
    app = FastAPI(title="AI Code Reviewer")
    app.state.gateway = gateway  # type: ignore[attr-defined]
    app.include_router(review_router)
    app.include_router(health_router)
    return app
