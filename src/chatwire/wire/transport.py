"""Classify an HTTP response from the provider.

The result has two levels. Reading or parsing the body can fail outright,
which raises :class:`~chatwire.errors.TransportError`. Otherwise an
:class:`HttpOutcome` is returned that holds either the parsed body or a
:class:`~chatwire.errors.ProviderError` describing the rejected request.
Retrying is left to the caller; this module only tags 429/5xx as retryable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from chatwire.errors import ProviderError, RequestFailedError, RetryableServerError, TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpOutcome:
    """Either a parsed response body or the provider error that replaced it."""

    body: Any = None
    error: ProviderError | None = None

    @classmethod
    def success(cls, body: Any) -> HttpOutcome:
        return cls(body=body)

    @classmethod
    def failure(cls, error: ProviderError) -> HttpOutcome:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the body, or raise the provider error."""
        if self.error is not None:
            raise self.error
        return self.body


async def handle_response(payload: dict[str, Any], response: httpx.Response) -> HttpOutcome:
    """Classify ``response`` to the request ``payload``.

    Raises:
        TransportError: If the body of a 200 response cannot be read or parsed.
    """
    status = response.status_code
    if status == httpx.codes.OK:
        try:
            await response.aread()
            body = response.json()
        except (httpx.HTTPError, httpx.StreamError, ValueError) as exc:
            raise TransportError(f"Could not parse response body: {exc}") from exc
        return HttpOutcome.success(body)

    if status == httpx.codes.TOO_MANY_REQUESTS or status >= 500:
        logger.warning("Provider returned retryable status %d", status)
        return HttpOutcome.failure(RetryableServerError(status))

    logger.debug("Provider rejected request with status %d", status)
    return HttpOutcome.failure(RequestFailedError(status, payload))
