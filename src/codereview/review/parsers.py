"""Parse free-form model output into a structured ReviewResult.

The model is asked for bare JSON but routinely wraps it in reasoning
traces, markdown fences or a sentence of prose. Each cleanup step below is
a no-op when its pattern is absent. Decoding gets exactly two attempts:
as extracted, then once more after dropping trailing commas.
"""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from codereview.errors import InvalidResponseError
from codereview.logging import get_logger
from codereview.review.models import ReviewResult

_log = get_logger(__name__)

SNIPPET_LENGTH = 500
_INVALID_MESSAGE = "AI returned an invalid response. Please try again."

_THINK_RE = re.compile(r"<think>.*?</think>", re.IGNORECASE | re.DOTALL)
_LEADING_FENCE_RE = re.compile(r"^\s*```(?:json)?[ \t]*\n?", re.IGNORECASE)
_TRAILING_FENCE_RE = re.compile(r"\n?```\s*$")
# Keeps \n (0x0A) and \r (0x0D).
_CONTROL_RE = re.compile(r"[\x00-\x09\x0b\x0c\x0e-\x1f]")
_TRAILING_COMMA_RE = re.compile(r",\s*([}\]])")


def strip_reasoning(text: str) -> str:
    """Remove every <think>...</think> block."""
    return _THINK_RE.sub("", text).strip()


def strip_code_fences(text: str) -> str:
    """Remove a leading ```/```json marker and a trailing ``` marker."""
    text = _LEADING_FENCE_RE.sub("", text)
    return _TRAILING_FENCE_RE.sub("", text).strip()


def strip_control_characters(text: str) -> str:
    """Remove raw control characters that make JSON decoders choke."""
    return _CONTROL_RE.sub("", text)


def slice_json_object(text: str) -> str:
    """Return the span from the first '{' to the last '}', or *text* unchanged.

    Braces inside surrounding prose can defeat this; a string-aware scanner
    would be needed to handle that.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return text
    return text[start : end + 1]


def remove_trailing_commas(text: str) -> str:
    """Drop commas that directly precede a closing brace or bracket."""
    return _TRAILING_COMMA_RE.sub(r"\1", text)


def _decode(text: str) -> Any:
    # strict=False tolerates raw newlines and tabs inside string values.
    return json.loads(text, strict=False)


def extract_json_object(raw_text: str) -> dict[str, Any]:
    """Recover a single JSON object from raw model output.

    Raises InvalidResponseError if no object can be decoded after the
    trailing-comma repair pass.
    """
    text = strip_reasoning(raw_text)
    text = strip_code_fences(text)
    text = strip_control_characters(text)
    text = slice_json_object(text)

    try:
        obj = _decode(text)
    except json.JSONDecodeError as first_exc:
        _log.debug(
            "First decode failed (%s); retrying without trailing commas", first_exc
        )
        try:
            obj = _decode(remove_trailing_commas(text))
        except json.JSONDecodeError as exc:
            snippet = text[:SNIPPET_LENGTH]
            _log.warning("Failed to parse AI response: %r", snippet)
            raise InvalidResponseError(_INVALID_MESSAGE, snippet=snippet) from exc

    if not isinstance(obj, dict):
        snippet = text[:SNIPPET_LENGTH]
        _log.warning("AI response is not a JSON object: %r", snippet)
        raise InvalidResponseError(_INVALID_MESSAGE, snippet=snippet)
    return obj


def parse_review_response(raw_text: str) -> ReviewResult:
    """Normalize raw model output into a ReviewResult.

    Missing collections decode as empty and unknown severities as info;
    shapes that cannot be coerced fail the whole parse.
    """
    obj = extract_json_object(raw_text)
    try:
        return ReviewResult.model_validate(obj)
    except PydanticValidationError as exc:
        snippet = json.dumps(obj)[:SNIPPET_LENGTH]
        _log.warning("AI response does not match the review schema: %s", exc)
        raise InvalidResponseError(_INVALID_MESSAGE, snippet=snippet) from exc
