"""Review pipeline: intake, prompt, model gateway, response normalization."""

from __future__ import annotations

from codereview.review.models import ReviewIssue, ReviewResult, Severity, quality_score
from codereview.review.runner import run_review

__all__ = [
    "ReviewIssue",
    "ReviewResult",
    "Severity",
    "quality_score",
    "run_review",
]
