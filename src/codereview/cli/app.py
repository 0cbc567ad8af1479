"""Typer CLI application definition for the code review service."""

from __future__ import annotations

import typer

from codereview.cli.commands.languages import languages
from codereview.cli.commands.review import review
from codereview.cli.commands.serve import serve

app = typer.Typer(
    name="codereview",
    help="AI code review CLI",
    no_args_is_help=True,
)

app.command("serve")(serve)
app.command("review")(review)
app.command("languages")(languages)
