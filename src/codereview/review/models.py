"""Review result models — the structured contract decoded from model output."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _scalar_text(value: object) -> object:
    """Render a JSON scalar as text; other values pass through unchanged."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int | float):
        return str(value)
    return value


class Severity(StrEnum):
    """Importance of a single issue."""

    critical = "critical"
    warning = "warning"
    info = "info"


class ReviewIssue(BaseModel):
    """A single finding within one review category."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    severity: Severity = Severity.info
    title: str = ""
    description: str = ""
    line: str | None = None  # offending snippet
    fix: str | None = None  # suggested replacement snippet

    @field_validator("severity", mode="before")
    @classmethod
    def _coerce_severity(cls, value: object) -> Severity:
        # Anything outside the closed set falls back to the lowest tag.
        if isinstance(value, str):
            try:
                return Severity(value.strip().lower())
            except ValueError:
                pass
        return Severity.info

    @field_validator("title", "description", mode="before")
    @classmethod
    def _blank_text(cls, value: object) -> object:
        return "" if value is None else _scalar_text(value)

    @field_validator("line", "fix", mode="before")
    @classmethod
    def _snippet_text(cls, value: object) -> object:
        # Multi-line snippets sometimes arrive as a list of lines.
        if isinstance(value, list):
            return "\n".join(
                str(_scalar_text(part)) for part in value if part is not None
            )
        return _scalar_text(value)


class ReviewResult(BaseModel):
    """The full review of one submission.

    Field aliases are the camelCase names used on the wire. Missing or null
    collections decode to empty lists so consumers never see absent values;
    scalar text fields arrive as strings and non-object issue entries are
    dropped.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    summary: str = ""
    bugs: list[ReviewIssue] = Field(default_factory=list)
    optimizations: list[ReviewIssue] = Field(default_factory=list)
    best_practices: list[ReviewIssue] = Field(
        default_factory=list, alias="bestPractices"
    )
    corrected_code: str = Field(default="", alias="correctedCode")

    @field_validator("bugs", "optimizations", "best_practices", mode="before")
    @classmethod
    def _issue_list(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, list):
            # Entries that are not objects carry no issue; skip them.
            return [
                item for item in value if isinstance(item, dict | ReviewIssue)
            ]
        return value

    @field_validator("summary", "corrected_code", mode="before")
    @classmethod
    def _null_text(cls, value: object) -> object:
        return "" if value is None else _scalar_text(value)

    @property
    def critical_bug_count(self) -> int:
        """Number of bugs with critical severity."""
        return sum(1 for b in self.bugs if b.severity == Severity.critical)

    @property
    def issue_count(self) -> int:
        """Total findings across all categories."""
        return len(self.bugs) + len(self.optimizations) + len(self.best_practices)

    def to_dict(self) -> dict[str, object]:
        """Serialize for JSON output using the wire field names."""
        return self.model_dump(mode="json", by_alias=True)


def quality_score(result: ReviewResult) -> int:
    """Heuristic 0-100 score derived from issue counts.

    A critical bug is penalised both as critical and as a bug.
    """
    score = (
        100
        - 20 * result.critical_bug_count
        - 8 * len(result.bugs)
        - 4 * len(result.optimizations)
        - 2 * len(result.best_practices)
    )
    return max(0, min(100, score))
