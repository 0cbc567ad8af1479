"""Input hygiene for review submissions.

Everything here runs before the model gateway is touched: a rejected
submission never costs a remote call.
"""

from __future__ import annotations

from dataclasses import dataclass

from codereview.errors import ValidationError
from codereview.languages import (
    ALLOWED_EXTENSIONS,
    AUTO,
    file_extension,
    resolve_language,
)

MAX_UPLOAD_BYTES = 5 * 1024 * 1024


@dataclass(frozen=True)
class ReviewSubmission:
    """Validated code and language tag ready for the pipeline."""

    code: str
    language: str = AUTO
    filename: str | None = None


def submission_from_text(
    code: str | None, language: str | None = None
) -> ReviewSubmission:
    """Build a submission from pasted code."""
    code = code or ""
    if not code.strip():
        raise ValidationError("No code provided. Paste code or upload a file.")
    return ReviewSubmission(code=code, language=language or AUTO)


def validate_upload(filename: str, size: int) -> None:
    """Reject uploads with a disallowed extension or above the size limit."""
    ext = file_extension(filename)
    if ext not in ALLOWED_EXTENSIONS:
        shown = ext or filename
        raise ValidationError(
            f"File type {shown} is not supported. Upload a source code file."
        )
    if size > MAX_UPLOAD_BYTES:
        raise ValidationError("File too large. Maximum size is 5MB.")


def submission_from_upload(
    filename: str, data: bytes, language: str | None = None
) -> ReviewSubmission:
    """Build a submission from an uploaded file's name and raw bytes."""
    validate_upload(filename, len(data))
    code = data.decode("utf-8", errors="replace")
    submission = submission_from_text(code, resolve_language(language, filename))
    return ReviewSubmission(
        code=submission.code,
        language=submission.language,
        filename=filename,
    )
