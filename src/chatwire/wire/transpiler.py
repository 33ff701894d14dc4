"""OpenAICompatTranspiler — request building and response parsing for one endpoint.

Bundles the encoder, decoder, usage extractor and context-length classifier
behind a single object configured with the endpoint's image format, and
traces each step.
"""

import logging
from typing import Any

from chatwire.core.config import ModelConfig
from chatwire.core.message import Message, Tool, ToolRequest, utc_timestamp
from chatwire.core.usage import Usage
from chatwire.errors import ContextLengthExceededError, MissingUsageDataError
from chatwire.utils.telemetry import (
    ATTR_CONTEXT_LENGTH_EXCEEDED,
    ATTR_IMAGE_FORMAT,
    ATTR_MESSAGES_COUNT,
    ATTR_MODEL,
    ATTR_TOKENS_INPUT,
    ATTR_TOKENS_OUTPUT,
    ATTR_TOKENS_TOTAL,
    ATTR_TOOL_ERRORS,
    ATTR_TOOLS_COUNT,
    ATTR_WIRE_MESSAGES_COUNT,
    get_tracer,
)
from chatwire.wire.context_length import ContextLengthClassifier, default_classifier
from chatwire.wire.images import ImageFormat
from chatwire.wire.request import create_openai_request_payload
from chatwire.wire.response import Clock, get_model, openai_response_to_message
from chatwire.wire.usage import get_openai_usage

_tracer = get_tracer(__name__)

logger = logging.getLogger(__name__)


class OpenAICompatTranspiler:
    """Converts between canonical messages and an OpenAI-compatible endpoint.

    Usage::

        transpiler = OpenAICompatTranspiler(ImageFormat.ANTHROPIC)
        payload = transpiler.build_request(config, system, messages, tools)
        ...
        message, usage = transpiler.parse_response(body)
    """

    def __init__(
        self,
        image_format: ImageFormat = ImageFormat.OPENAI,
        *,
        classifier: ContextLengthClassifier | None = None,
        clock: Clock = utc_timestamp,
    ) -> None:
        self.image_format = image_format
        self.classifier = classifier or default_classifier
        self._clock = clock

    def build_request(
        self,
        model_config: ModelConfig,
        system: str,
        messages: list[Message],
        tools: list[Tool],
    ) -> dict[str, Any]:
        """Build the request body for ``messages`` and ``tools``."""
        with _tracer.start_as_current_span("wire.build_request") as span:
            span.set_attribute(ATTR_MODEL, model_config.model_name)
            span.set_attribute(ATTR_IMAGE_FORMAT, self.image_format.value)
            span.set_attribute(ATTR_MESSAGES_COUNT, len(messages))
            span.set_attribute(ATTR_TOOLS_COUNT, len(tools))

            payload = create_openai_request_payload(
                model_config, system, messages, tools, self.image_format
            )
            span.set_attribute(ATTR_WIRE_MESSAGES_COUNT, len(payload["messages"]))
            return payload

    def parse_response(self, response: dict[str, Any]) -> tuple[Message, Usage]:
        """Decode the assistant message and token usage from a response body.

        A body without ``usage`` yields an empty :class:`Usage` rather than
        failing the whole response.
        """
        with _tracer.start_as_current_span("wire.parse_response") as span:
            span.set_attribute(ATTR_MODEL, get_model(response))

            message = openai_response_to_message(response, clock=self._clock)
            tool_errors = sum(
                1 for item in message.content if isinstance(item, ToolRequest) and not item.ok
            )
            span.set_attribute(ATTR_TOOL_ERRORS, tool_errors)

            try:
                usage = get_openai_usage(response)
            except MissingUsageDataError:
                logger.debug("Response from %s has no usage data", get_model(response))
                usage = Usage()

            if usage.input_tokens is not None:
                span.set_attribute(ATTR_TOKENS_INPUT, usage.input_tokens)
            if usage.output_tokens is not None:
                span.set_attribute(ATTR_TOKENS_OUTPUT, usage.output_tokens)
            if usage.total_tokens is not None:
                span.set_attribute(ATTR_TOKENS_TOTAL, usage.total_tokens)

            return message, usage

    def check_context_length(self, error: Any) -> ContextLengthExceededError | None:
        """Return a normalized error if ``error`` reports an exceeded context window."""
        with _tracer.start_as_current_span("wire.check_context_length") as span:
            result = self.classifier.classify(error)
            span.set_attribute(ATTR_CONTEXT_LENGTH_EXCEEDED, result is not None)
            return result
