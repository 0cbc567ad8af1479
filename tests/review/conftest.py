"""Shared fixtures for review pipeline tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest


class RecordingTransport:
    """httpx mock handler that records requests and replays one response."""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def json_bodies(self) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def completion_body() -> Callable[[str | None], dict[str, Any]]:
    """Factory for a minimal chat-completion envelope carrying some content."""

    def _body(content: str | None) -> dict[str, Any]:
        return {
            "id": "gen-1",
            "object": "chat.completion",
            "created": 1700000000,
            "model": "test/model",
            "choices": [
                {
                    "index": 0,
                    "finish_reason": "stop",
                    "message": {"role": "assistant", "content": content},
                }
            ],
        }

    return _body


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Factory for a RecordingTransport answering with a fixed response."""

    def _make(
        status_code: int = 200,
        json_data: Any = None,
        text: str = "",
    ) -> RecordingTransport:
        if json_data is not None:
            response = httpx.Response(status_code, json=json_data)
        else:
            response = httpx.Response(status_code, text=text)
        return RecordingTransport(response)

    return _make
