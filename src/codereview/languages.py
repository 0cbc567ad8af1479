"""Language detection: maps file extensions to canonical language tags."""

from __future__ import annotations

AUTO = "auto"

EXT_TO_LANGUAGE: dict[str, str] = {
    ".js": "javascript",
    ".ts": "typescript",
    ".jsx": "javascript",
    ".tsx": "typescript",
    ".py": "python",
    ".java": "java",
    ".c": "c",
    ".cpp": "cpp",
    ".cs": "csharp",
    ".go": "go",
    ".rs": "rust",
    ".rb": "ruby",
    ".php": "php",
    ".swift": "swift",
    ".kt": "kotlin",
    ".scala": "scala",
    ".html": "html",
    ".css": "css",
    ".sql": "sql",
    ".sh": "bash",
    ".bash": "bash",
    ".dart": "dart",
    ".lua": "lua",
    ".r": "r",
    ".vue": "vue",
    ".svelte": "svelte",
}

# Uploads may also carry headers, scripts and structured data/doc files.
ALLOWED_EXTENSIONS: frozenset[str] = frozenset(EXT_TO_LANGUAGE) | {
    ".ps1",
    ".m",
    ".mm",
    ".h",
    ".hpp",
    ".json",
    ".xml",
    ".yaml",
    ".yml",
}

LANGUAGE_OPTIONS: list[tuple[str, str]] = [
    (AUTO, "Auto Detect"),
    ("javascript", "JavaScript"),
    ("typescript", "TypeScript"),
    ("python", "Python"),
    ("java", "Java"),
    ("cpp", "C++"),
    ("c", "C"),
    ("csharp", "C#"),
    ("go", "Go"),
    ("rust", "Rust"),
    ("ruby", "Ruby"),
    ("php", "PHP"),
    ("swift", "Swift"),
    ("kotlin", "Kotlin"),
    ("dart", "Dart"),
    ("sql", "SQL"),
    ("html", "HTML"),
    ("css", "CSS"),
    ("bash", "Bash"),
]


def file_extension(filename: str) -> str:
    """Return the lowercased extension including its dot, or "" if none."""
    dot = filename.rfind(".")
    if dot == -1:
        return ""
    return filename[dot:].lower()


def detect_language(filename: str) -> str:
    """Detect the language tag for *filename*, or ``AUTO`` if unknown."""
    return EXT_TO_LANGUAGE.get(file_extension(filename), AUTO)


def resolve_language(selected: str | None, filename: str | None = None) -> str:
    """Pick the language for a submission.

    An explicit selection other than ``auto`` always wins; otherwise the
    tag is inferred from *filename* when one is given.
    """
    if selected and selected != AUTO:
        return selected
    if filename:
        return detect_language(filename)
    return AUTO
