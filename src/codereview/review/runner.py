"""Review execution: build prompt, call the model gateway, parse the reply."""

from __future__ import annotations

from typing import Protocol

from codereview.logging import get_logger
from codereview.review.intake import ReviewSubmission
from codereview.review.models import ReviewResult
from codereview.review.parsers import parse_review_response
from codereview.review.prompt import build_prompt

_log = get_logger(__name__)


class CompletionGateway(Protocol):
    """Anything that turns a prompt into raw model text."""

    async def complete(self, prompt: str) -> str: ...


async def run_review(
    submission: ReviewSubmission, gateway: CompletionGateway
) -> ReviewResult:
    """Review one validated submission with a single model call.

    This is the primary interface for both the HTTP API and the CLI.
    Errors from the gateway or the normalizer propagate unchanged.
    """
    _log.info(
        "Reviewing %d chars of %s", len(submission.code), submission.language
    )
    prompt = build_prompt(submission.code, submission.language)
    raw_output = await gateway.complete(prompt)
    _log.debug("Received %d chars from model", len(raw_output))

    result = parse_review_response(raw_output)
    _log.info(
        "Review complete: %d bugs, %d optimizations, %d best practices",
        len(result.bugs),
        len(result.optimizations),
        len(result.best_practices),
    )
    return result
