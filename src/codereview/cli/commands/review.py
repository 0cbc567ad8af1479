"""review command — review a local file and render the result."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from codereview.config import Settings
from codereview.errors import ReviewError
from codereview.languages import AUTO
from codereview.review.gateway import ModelGateway
from codereview.review.intake import (
    ReviewSubmission,
    submission_from_text,
    submission_from_upload,
    validate_upload,
)
from codereview.review.models import (
    ReviewIssue,
    ReviewResult,
    Severity,
    quality_score,
)
from codereview.review.runner import run_review

NO_CHANGES_PLACEHOLDER = "No changes needed — the code looks good."

_SEVERITY_COLORS: dict[Severity, str] = {
    Severity.critical: "red",
    Severity.warning: "yellow",
    Severity.info: "cyan",
}


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def score_color(score: int) -> str:
    """Color band for a quality score."""
    if score >= 80:
        return "bright_green"
    if score >= 50:
        return "yellow"
    return "red"


def display_result(
    result: ReviewResult,
    submission: ReviewSubmission,
    output_mode: str,
    output_path: str | None,
    verbosity: int = 0,
) -> None:
    """Format and deliver review results based on output mode."""
    match output_mode:
        case "terminal":
            _display_terminal(result, submission, verbosity)
        case "json":
            _display_json(result)
        case "file":
            _write_file(result, output_path)
        case _:
            rprint(f"[red]Unknown output mode: {output_mode}[/red]")
            raise typer.Exit(code=1)


def _print_issue(console: Console, issue: ReviewIssue, verbosity: int) -> None:
    color = _SEVERITY_COLORS[issue.severity]
    badge = escape(f"[{issue.severity.value}]")
    console.print(
        f"  [{color}]{badge}[/{color}] "
        f"[bold white]{escape(issue.title or 'Untitled issue')}[/bold white]"
    )
    if verbosity < 1:
        return
    for line in issue.description.split("\n"):
        if line:
            console.print(f"    {escape(line)}")
    if issue.line:
        console.print("    Problem:", style="red")
        for line in issue.line.split("\n"):
            console.print(f"      {escape(line)}")
    if issue.fix:
        console.print("    Fix:", style="green")
        for line in issue.fix.split("\n"):
            console.print(f"      {escape(line)}")


def _display_terminal(
    result: ReviewResult, submission: ReviewSubmission, verbosity: int = 0
) -> None:
    """Rich-formatted terminal output with verbosity levels.

    Level 0: score, summary, issue headings with severity
    Level 1: above + descriptions and problem/fix snippets
    Level 2: above + corrected code
    """
    console = Console()
    score = quality_score(result)

    header = Text(f"Review: {submission.filename or 'pasted code'}", style="bold")
    header.append("  Score: ", style="dim")
    header.append(str(score), style=f"bold {score_color(score)}")
    header.append("  Language: ", style="dim")
    header.append(submission.language)
    console.print(Panel(header, expand=False))

    if result.summary:
        console.print(result.summary, markup=False)
    console.print(
        f"Issues: {result.issue_count}  "
        f"Bugs: {len(result.bugs)}  "
        f"Optimizations: {len(result.optimizations)}  "
        f"Best practices: {len(result.best_practices)}",
        style="dim",
    )

    sections = [
        ("Bugs", result.bugs),
        ("Optimizations", result.optimizations),
        ("Best Practices", result.best_practices),
    ]
    for title, issues in sections:
        console.print()
        console.rule(f"{title} ({len(issues)})", style="dim")
        if not issues:
            console.print("  No issues found.", style="dim")
            continue
        for issue in issues:
            _print_issue(console, issue, verbosity)

    if verbosity >= 2:
        console.print()
        console.rule("Corrected Code", style="dim")
        if result.corrected_code:
            lexer = "text" if submission.language == AUTO else submission.language
            console.print(Syntax(result.corrected_code, lexer, line_numbers=True))
        else:
            console.print(NO_CHANGES_PLACEHOLDER, style="green")


def _display_json(result: ReviewResult) -> None:
    typer.echo(result.model_dump_json(by_alias=True, indent=2))


def _write_file(result: ReviewResult, output_path: str | None) -> None:
    """Save the review as camelCase JSON, creating parent directories."""
    if output_path is None:
        rprint("[red]Error: --output file needs --output-path.[/red]")
        raise typer.Exit(code=1)
    target = Path(output_path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(result.model_dump_json(by_alias=True, indent=2) + "\n")
    rprint(f"[green]Saved review to {escape(str(target))}[/green]")


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _read_submission(path: str, language: str) -> ReviewSubmission:
    """Read code from *path* (or stdin for "-") through intake validation."""
    if path == "-":
        code = typer.get_text_stream("stdin").read()
        return submission_from_text(code, language)
    source = Path(path)
    if not source.is_file():
        rprint(f"[red]Error: File not found: {escape(path)}[/red]")
        raise typer.Exit(code=1)
    validate_upload(source.name, source.stat().st_size)
    return submission_from_upload(source.name, source.read_bytes(), language)


def _resolve_settings(model: str | None) -> Settings:
    """Load settings, applying a non-blank --model override."""
    settings = Settings()
    if model and model.strip():
        settings = settings.model_copy(update={"openrouter_model": model})
    return settings


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


def review(
    path: str = typer.Argument(help="Source file to review, or - to read stdin"),
    language: str = typer.Option(
        AUTO, "--language", "-l", help="Language tag (default: detect from file)"
    ),
    model: str | None = typer.Option(
        None, "--model", help="Model override (e.g. openai/gpt-4o-mini)"
    ),
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True, help="Verbosity level (-v, -vv)"
    ),
    output: str = typer.Option(
        "terminal", "--output", help="Output format: terminal, json, file"
    ),
    output_path: str | None = typer.Option(
        None, "--output-path", help="File path for --output file"
    ),
) -> None:
    """Review a source file with the configured AI model."""
    try:
        submission = _read_submission(path, language)
        gateway = ModelGateway(_resolve_settings(model))
        result = asyncio.run(run_review(submission, gateway))
    except ReviewError as exc:
        rprint(f"[red]Error: Review failed — {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    display_result(result, submission, output, output_path, verbose)

    # Exit with non-zero if the review found critical bugs
    if result.critical_bug_count:
        raise typer.Exit(code=2)
