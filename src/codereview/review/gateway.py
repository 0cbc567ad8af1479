"""Model gateway — the single outbound call to the chat-completion service."""

from __future__ import annotations

import httpx
import openai
from openai import AsyncOpenAI

from codereview.config import PLACEHOLDER_API_KEY, Settings
from codereview.errors import (
    AuthError,
    ConfigurationError,
    EmptyResponseError,
    RateLimitError,
    UpstreamError,
)
from codereview.logging import get_logger

_log = get_logger(__name__)

TEMPERATURE = 0.3


class ModelGateway:
    """Sends one prompt to an OpenAI-compatible endpoint and returns the reply.

    Settings are fixed at construction. No retries are attempted: every
    failure is classified and raised to the caller.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._http_client = http_client

    @property
    def model(self) -> str:
        return self._settings.openrouter_model

    def _api_key(self) -> str:
        key = self._settings.openrouter_api_key
        if not key or not key.strip() or key == PLACEHOLDER_API_KEY:
            raise ConfigurationError(
                "OPENROUTER_API_KEY is not configured. Set it in your .env file."
            )
        return key

    def _build_client(self, api_key: str) -> AsyncOpenAI:
        return AsyncOpenAI(
            api_key=api_key,
            base_url=self._settings.openrouter_base_url,
            default_headers={
                "HTTP-Referer": self._settings.app_referer,
                "X-Title": self._settings.app_title,
            },
            timeout=self._settings.request_timeout,
            max_retries=0,
            http_client=self._http_client,
        )

    async def complete(self, prompt: str) -> str:
        """Return the first completion's text for *prompt*.

        Raises ConfigurationError before any network I/O when the credential
        is unusable.
        """
        api_key = self._api_key()
        client = self._build_client(api_key)
        _log.debug(
            "Requesting completion (model=%s, chars=%d)", self.model, len(prompt)
        )
        try:
            completion = await client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=TEMPERATURE,
            )
        except (openai.AuthenticationError, openai.PermissionDeniedError) as exc:
            _log.warning("Model service rejected credential: %s", exc.status_code)
            raise AuthError(
                "Invalid OpenRouter API key. Check your .env configuration."
            ) from exc
        except openai.RateLimitError as exc:
            _log.warning("Model service rate limited the request")
            raise RateLimitError(
                "Rate limit exceeded. Please wait a moment and try again."
            ) from exc
        except openai.APIStatusError as exc:
            body = exc.response.text
            _log.warning(
                "Model service error (status=%d): %s",
                exc.status_code,
                body,
                extra={"status_code": exc.status_code, "model": self.model},
            )
            raise UpstreamError(
                f"OpenRouter API error ({exc.status_code}).",
                status_code=exc.status_code,
                body=body,
            ) from exc
        except openai.APIConnectionError as exc:
            _log.warning("Could not reach model service: %s", exc)
            raise UpstreamError("Could not reach the AI model service.") from exc
        finally:
            if self._http_client is None:
                await client.close()

        choices = getattr(completion, "choices", None) or []
        message = getattr(choices[0], "message", None) if choices else None
        content = getattr(message, "content", None)
        if not content:
            raise EmptyResponseError("No response received from the AI model.")
        return content
