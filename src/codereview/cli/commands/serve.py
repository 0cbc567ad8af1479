"""serve command — run the review HTTP API."""

from __future__ import annotations

import typer
from rich import print as rprint

from codereview.config import Settings
from codereview.logging import setup_logging
from codereview.server.launch import start_server


def serve(
    host: str | None = typer.Option(
        None, "--host", help="Override bind address (default: 127.0.0.1)"
    ),
    port: int | None = typer.Option(
        None, "--port", help="Override HTTP port (default: 8000)"
    ),
) -> None:
    """Start the code review API server."""
    settings = Settings()
    overrides: dict[str, object] = {}
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port
    if overrides:
        settings = settings.model_copy(update=overrides)

    setup_logging(settings)
    if not settings.openrouter_api_key:
        rprint(
            "[yellow]Warning: OPENROUTER_API_KEY is not set;"
            " reviews will be rejected until it is configured.[/yellow]"
        )
    rprint(f"[green]Starting server on {settings.host}:{settings.port}[/green]")
    start_server(settings)
