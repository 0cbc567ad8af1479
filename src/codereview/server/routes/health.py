"""Health check route for the review API."""

from __future__ import annotations

from fastapi import APIRouter, Request

from codereview.server.models import HealthResponse

health_router = APIRouter()


@health_router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    """Return service status and the configured model identifier."""
    gateway = request.app.state.gateway
    return HealthResponse(status="ok", model=gateway.model)
