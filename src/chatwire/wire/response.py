"""OpenAI chat-completion response → canonical assistant message."""

import json
import logging
from collections.abc import Callable
from typing import Any

from chatwire.core.content import Content
from chatwire.core.message import (
    AgentError,
    Message,
    MessageContent,
    ToolCall,
    ToolRequest,
    utc_timestamp,
)
from chatwire.errors import ResponseFormatError
from chatwire.wire.names import FUNCTION_NAME_PATTERN, is_valid_function_name

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def openai_response_to_message(
    response: dict[str, Any],
    *,
    clock: Clock = utc_timestamp,
) -> Message:
    """Decode ``choices[0].message`` into an assistant :class:`Message`.

    A malformed tool call never fails the whole decode: it becomes a
    :class:`ToolRequest` carrying an :class:`AgentError`.

    Args:
        response: The full provider response body.
        clock: Source of the ``created`` timestamp (unix seconds).

    Raises:
        ResponseFormatError: If ``choices[0].message`` is missing.
    """
    original = _first_message(response)
    content: list[MessageContent] = []

    text = original.get("content")
    if isinstance(text, str):
        content.append(Content.from_text(text))

    tool_calls = original.get("tool_calls")
    if isinstance(tool_calls, list):
        for tool_call in tool_calls:
            content.append(_parse_tool_call(tool_call))

    return Message(role="assistant", created=clock(), content=content)


def get_model(data: dict[str, Any]) -> str:
    """Return the top-level ``model`` name of a response, or ``"Unknown"``."""
    model = data.get("model")
    if isinstance(model, str):
        return model
    return "Unknown"


def _first_message(response: dict[str, Any]) -> dict[str, Any]:
    try:
        message = response["choices"][0]["message"]
    except (KeyError, IndexError, TypeError) as exc:
        msg = "Response has no choices[0].message"
        raise ResponseFormatError(msg) from exc
    if not isinstance(message, dict):
        msg = "Response choices[0].message is not an object"
        raise ResponseFormatError(msg)
    return message


def _parse_tool_call(tool_call: Any) -> ToolRequest:
    if not isinstance(tool_call, dict):
        tool_call = {}
    function = tool_call.get("function")
    if not isinstance(function, dict):
        function = {}
    id = _as_str(tool_call.get("id"))
    name = _as_str(function.get("name"))
    arguments = _as_str(function.get("arguments"))

    if not is_valid_function_name(name):
        logger.debug("Rejecting tool call %s with invalid function name %r", id, name)
        error = AgentError.tool_not_found(
            f"The provided function name '{name}' had invalid characters, "
            f"it must match this regex {FUNCTION_NAME_PATTERN}"
        )
        return ToolRequest(id=id, error=error)

    try:
        params = json.loads(arguments)
    except json.JSONDecodeError as exc:
        logger.debug("Rejecting tool call %s with unparseable arguments", id)
        error = AgentError.invalid_parameters(
            f"Could not interpret tool use parameters for id {id}: {exc}"
        )
        return ToolRequest(id=id, error=error)

    return ToolRequest(id=id, tool_call=ToolCall(name=name, arguments=params))


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""
