"""Shared fixtures for server tests: fake gateway, app and in-process client."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import httpx
import pytest

from codereview.server.app import create_app


@pytest.fixture
def app(fake_gateway: Any) -> Any:
    """FastAPI test app backed by the fake gateway fixture."""
    return create_app(fake_gateway)


@pytest.fixture
async def async_client(app: Any) -> AsyncIterator[httpx.AsyncClient]:
    """httpx AsyncClient using ASGITransport for in-process route testing."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as client:
        yield client
