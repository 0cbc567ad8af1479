"""languages command — list selectable language tags."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from codereview.languages import LANGUAGE_OPTIONS


def languages() -> None:
    """List language tags accepted by --language."""
    table = Table(title="Languages")
    table.add_column("Tag", style="bold")
    table.add_column("Name")
    for value, label in LANGUAGE_OPTIONS:
        table.add_row(value, label)
    Console().print(table)
