"""FastAPI HTTP API for submitting code reviews."""

from __future__ import annotations

from codereview.server.app import create_app

__all__ = ["create_app"]
