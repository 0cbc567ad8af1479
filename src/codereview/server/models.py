"""Pydantic models for the HTTP API — request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel

from codereview.review.models import ReviewResult


class ReviewRequest(BaseModel):
    """JSON request body for POST /api/review."""

    code: str | None = None
    language: str | None = None


class ReviewResponse(BaseModel):
    """Successful review response."""

    success: bool = True
    review: ReviewResult


class LanguageOption(BaseModel):
    """One entry of the language picker."""

    value: str
    label: str


class HealthResponse(BaseModel):
    """Response body for GET /health."""

    status: str
    model: str


class ErrorResponse(BaseModel):
    """Standard error response body."""

    error: str
