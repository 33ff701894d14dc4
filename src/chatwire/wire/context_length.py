"""Recognize "context length exceeded" errors across provider error shapes.

Each check is a pure function from an error body to an optional
:class:`ContextLengthExceededError`. New provider shapes are added by
registering another check; existing checks are never modified.
"""

from collections.abc import Callable
from typing import Any

from chatwire.errors import ContextLengthExceededError

ContextLengthCheck = Callable[[Any], ContextLengthExceededError | None]

_OPENAI_CODES = frozenset({"context_length_exceeded", "string_above_max_length"})


def check_openai_context_length_error(error: Any) -> ContextLengthExceededError | None:
    """Match an OpenAI error object by its ``code``."""
    if not isinstance(error, dict):
        return None
    code = error.get("code")
    if not isinstance(code, str) or code not in _OPENAI_CODES:
        return None
    message = error.get("message")
    return ContextLengthExceededError(message if isinstance(message, str) else "Unknown error")


def check_bedrock_context_length_error(error: Any) -> ContextLengthExceededError | None:
    """Match a Bedrock error whose ``external_model_message.message`` says "too long"."""
    if not isinstance(error, dict):
        return None
    external = error.get("external_model_message")
    if not isinstance(external, dict):
        return None
    message = external.get("message")
    if isinstance(message, str) and "too long" in message.lower():
        return ContextLengthExceededError(message)
    return None


class ContextLengthClassifier:
    """Runs registered checks in order and returns the first match."""

    def __init__(self, checks: list[ContextLengthCheck] | None = None) -> None:
        self._checks: list[ContextLengthCheck] = list(checks or [])

    @property
    def checks(self) -> list[ContextLengthCheck]:
        return list(self._checks)

    def register(self, check: ContextLengthCheck) -> None:
        """Append ``check`` after the existing ones."""
        self._checks.append(check)

    def classify(self, error: Any) -> ContextLengthExceededError | None:
        for check in self._checks:
            result = check(error)
            if result is not None:
                return result
        return None


default_classifier = ContextLengthClassifier(
    [check_openai_context_length_error, check_bedrock_context_length_error]
)


def classify_context_length_error(error: Any) -> ContextLengthExceededError | None:
    """Classify ``error`` with the default OpenAI-then-Bedrock checks."""
    return default_classifier.classify(error)
