"""Shared error types for the wire translation layer.

Per-tool-call failures are not raised; they travel as
:class:`~chatwire.core.message.AgentError` values inside the decoded message.
The exceptions below cover whole-request or whole-response failures.
"""

from __future__ import annotations

import json
from typing import Any


class ChatwireError(Exception):
    """Base error for all translation-layer failures."""


class DuplicateToolNameError(ChatwireError):
    """Two tools in one request share the same function name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate tool name: {name}")


class MissingUsageDataError(ChatwireError):
    """The provider response has no ``usage`` object."""

    def __init__(self, detail: str = "No usage data in response") -> None:
        super().__init__(detail)


class ResponseFormatError(ChatwireError):
    """The provider response is missing a structurally required field."""


class TransportError(ChatwireError):
    """The response body could not be read or parsed."""


class ContextLengthExceededError(ChatwireError):
    """The provider reports that the prompt exceeded the model's context window."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Context length exceeded. Message: {message}")


class ProviderError(ChatwireError):
    """The provider answered with a non-success HTTP status."""

    retryable: bool = False

    def __init__(self, status: int, detail: str) -> None:
        self.status = status
        super().__init__(detail)


class RetryableServerError(ProviderError):
    """HTTP 429 or 5xx. The caller may retry with its own policy."""

    retryable = True

    def __init__(self, status: int) -> None:
        super().__init__(status, f"Server error: {status}")


class RequestFailedError(ProviderError):
    """Any other non-200 status. Terminal for this attempt."""

    def __init__(self, status: int, payload: Any) -> None:
        self.payload = payload
        super().__init__(status, f"Request failed: {status}\nPayload: {json.dumps(payload, default=str)}")
