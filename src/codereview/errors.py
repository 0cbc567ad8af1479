"""Exception hierarchy for the review pipeline.

Every error is terminal for the request that raised it. The string form of
each exception is safe to show to an end user; diagnostic detail lives in
attributes and is only logged.
"""

from __future__ import annotations


class ReviewError(Exception):
    """Base exception for all review pipeline errors."""


class ValidationError(ReviewError):
    """Bad input at intake: unsupported extension, oversized file, empty code."""


class ConfigurationError(ReviewError):
    """The model service credential is missing or still a placeholder."""


class AuthError(ReviewError):
    """The model service rejected the configured credential (401/403)."""


class RateLimitError(ReviewError):
    """The model service throttled the request (429)."""


class UpstreamError(ReviewError):
    """Any other failure talking to the model service."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class EmptyResponseError(ReviewError):
    """The model service answered successfully but without any content."""


class InvalidResponseError(ReviewError):
    """The model reply could not be decoded into a review."""

    def __init__(self, message: str, snippet: str = "") -> None:
        super().__init__(message)
        self.snippet = snippet
