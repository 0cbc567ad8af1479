"""Review submission and language listing routes."""

from __future__ import annotations

import json

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.datastructures import UploadFile

from codereview.errors import (
    AuthError,
    ConfigurationError,
    RateLimitError,
    ReviewError,
    ValidationError,
)
from codereview.languages import LANGUAGE_OPTIONS
from codereview.logging import get_logger
from codereview.review.gateway import ModelGateway
from codereview.review.intake import (
    ReviewSubmission,
    submission_from_text,
    submission_from_upload,
    validate_upload,
)
from codereview.review.runner import run_review
from codereview.server.models import (
    ErrorResponse,
    LanguageOption,
    ReviewRequest,
    ReviewResponse,
)

_log = get_logger(__name__)

review_router = APIRouter(prefix="/api")

_STATUS_BY_ERROR: list[tuple[type[ReviewError], int]] = [
    (ValidationError, 400),
    (ConfigurationError, 401),
    (AuthError, 401),
    (RateLimitError, 429),
]


def _get_gateway(request: Request) -> ModelGateway:
    return request.app.state.gateway  # type: ignore[no-any-return]


def _status_for(exc: ReviewError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 500


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


async def _read_submission(request: Request) -> ReviewSubmission:
    """Build a submission from a JSON body or a multipart upload."""
    content_type = request.headers.get("content-type", "")

    if "multipart/form-data" in content_type:
        form = await request.form()
        language = form.get("language")
        language = language if isinstance(language, str) else None
        upload = form.get("file")
        if isinstance(upload, UploadFile) and upload.filename:
            if upload.size is not None:
                validate_upload(upload.filename, upload.size)
            data = await upload.read()
            return submission_from_upload(upload.filename, data, language)
        return submission_from_text("", language)

    try:
        body = ReviewRequest.model_validate(await request.json())
    except (json.JSONDecodeError, UnicodeDecodeError, PydanticValidationError) as exc:
        raise ValidationError(
            "Request body must be JSON with a 'code' field."
        ) from exc
    return submission_from_text(body.code, body.language)


@review_router.post("/review", response_model=ReviewResponse)
async def submit_review(request: Request) -> ReviewResponse | JSONResponse:
    """Review pasted code (JSON) or an uploaded file (multipart)."""
    try:
        submission = await _read_submission(request)
        review = await run_review(submission, _get_gateway(request))
    except ReviewError as exc:
        status = _status_for(exc)
        _log.warning("Review failed (%d): %s", status, exc)
        return _error(status, str(exc))
    except Exception:
        _log.exception("Unexpected error during review")
        return _error(500, "An unexpected error occurred.")
    return ReviewResponse(success=True, review=review)


@review_router.get("/languages", response_model=list[LanguageOption])
async def list_languages() -> list[LanguageOption]:
    """List selectable language tags."""
    return [
        LanguageOption(value=value, label=label) for value, label in LANGUAGE_OPTIONS
    ]
