"""AI code review service: prompt a remote model and normalize its review."""

__version__ = "0.1.0"
