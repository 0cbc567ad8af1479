"""Application configuration via Pydantic Settings."""

from __future__ import annotations

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODEL = "google/gemini-2.0-flash-001"
PLACEHOLDER_API_KEY = "your_openrouter_api_key_here"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Variables are prefixed with ``CODEREVIEW_`` (e.g. ``CODEREVIEW_LOG_LEVEL``).
    The credential and model override also accept the conventional
    ``OPENROUTER_API_KEY`` and ``OPENROUTER_MODEL`` names.
    """

    model_config = SettingsConfigDict(
        env_prefix="CODEREVIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Remote model service
    openrouter_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "OPENROUTER_API_KEY", "CODEREVIEW_OPENROUTER_API_KEY"
        ),
    )
    openrouter_model: str = Field(
        default=DEFAULT_MODEL,
        validation_alias=AliasChoices(
            "OPENROUTER_MODEL", "CODEREVIEW_OPENROUTER_MODEL"
        ),
    )
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    app_referer: str = "http://localhost:3000"
    app_title: str = "AI Code Reviewer"
    request_timeout: float = 120.0

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "text"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    @field_validator("openrouter_model", mode="before")
    @classmethod
    def _default_blank_model(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_MODEL
        return value
