"""Token usage extraction from an OpenAI-style response body."""

import math
from typing import Any

from chatwire.core.usage import Usage
from chatwire.errors import MissingUsageDataError


def get_openai_usage(data: dict[str, Any]) -> Usage:
    """Read ``usage.prompt_tokens``/``completion_tokens``/``total_tokens``.

    ``total_tokens`` falls back to input + output when the provider omits it
    and both halves are present. A ``usage`` value that is not an object
    (``null`` included) reads as empty.

    Raises:
        MissingUsageDataError: If the body has no ``usage`` key.
    """
    if "usage" not in data:
        raise MissingUsageDataError()
    usage = data["usage"]
    if not isinstance(usage, dict):
        usage = {}

    input_tokens = _token_count(usage.get("prompt_tokens"))
    output_tokens = _token_count(usage.get("completion_tokens"))
    total_tokens = _token_count(usage.get("total_tokens"))
    if total_tokens is None and input_tokens is not None and output_tokens is not None:
        total_tokens = input_tokens + output_tokens

    return Usage(
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        total_tokens=total_tokens,
    )


def _token_count(value: Any) -> int | None:
    # bool is an int subclass but never a count.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return int(value)
