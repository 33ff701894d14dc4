"""Assemble a complete OpenAI-compatible chat-completion request body."""

from typing import Any

from chatwire.core.config import ModelConfig
from chatwire.core.message import Message, Tool
from chatwire.wire.images import ImageFormat
from chatwire.wire.messages import messages_to_openai_spec
from chatwire.wire.tools import tools_to_openai_spec


def create_openai_request_payload(
    model_config: ModelConfig,
    system: str,
    messages: list[Message],
    tools: list[Tool],
    image_format: ImageFormat = ImageFormat.OPENAI,
) -> dict[str, Any]:
    """Build ``{"model", "messages", "tools"?, "temperature"?, "max_tokens"?}``.

    The system prompt becomes the first message. ``tools`` is omitted when
    empty, and generation parameters when unset.

    Raises:
        DuplicateToolNameError: If two tools share a name.
    """
    tools_spec = tools_to_openai_spec(tools)
    payload: dict[str, Any] = {
        "model": model_config.model_name,
        "messages": [
            {"role": "system", "content": system},
            *messages_to_openai_spec(messages, image_format),
        ],
    }
    if tools_spec:
        payload["tools"] = tools_spec
    if model_config.temperature is not None:
        payload["temperature"] = model_config.temperature
    if model_config.max_tokens is not None:
        payload["max_tokens"] = model_config.max_tokens
    return payload
