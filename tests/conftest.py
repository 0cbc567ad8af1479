"""Shared pytest fixtures for the codereview test suite."""

from __future__ import annotations

import json
from collections.abc import Callable

import pytest

from codereview.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Settings instance with test defaults, ignoring any .env file on disk."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        openrouter_api_key="test-api-key",
        openrouter_model="test/model",
        log_level="DEBUG",
        log_format="text",
    )


REVIEW_JSON = json.dumps(
    {
        "summary": "Small function with an off-by-one bug.",
        "bugs": [
            {
                "severity": "critical",
                "title": "Off-by-one",
                "description": "range(len(xs) + 1) indexes past the end.",
                "line": "for i in range(len(xs) + 1):",
                "fix": "for i in range(len(xs)):",
            }
        ],
        "optimizations": [],
        "bestPractices": [
            {
                "severity": "info",
                "title": "Iterate directly",
                "description": "Loop over the list instead of indices.",
            }
        ],
        "correctedCode": "for x in xs:\n    print(x)\n",
    }
)


class FakeGateway:
    """Test double satisfying the gateway interface; records every prompt."""

    def __init__(self, reply: str, error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []
        self.model = "test/model"

    @property
    def call_count(self) -> int:
        return len(self.prompts)

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def review_json() -> str:
    """A well-formed model reply with one critical bug and one best practice."""
    return REVIEW_JSON


@pytest.fixture
def make_gateway() -> Callable[..., FakeGateway]:
    """Factory for FakeGateway instances with a canned reply or error."""

    def _make(reply: str = REVIEW_JSON, error: Exception | None = None) -> FakeGateway:
        return FakeGateway(reply, error)

    return _make


@pytest.fixture
def fake_gateway(make_gateway: Callable[..., FakeGateway]) -> FakeGateway:
    """FakeGateway replying with ``REVIEW_JSON``."""
    return make_gateway()
