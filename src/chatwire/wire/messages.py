"""Canonical messages → OpenAI chat-completion messages.

One canonical message can expand into several wire messages:

- the *primary* message carries the role, the text or image content, and any
  successful ``tool_calls``;
- tool responses and failed tool requests become ``tool`` role messages;
- images returned by a tool cannot go into a ``tool`` message, so each one is
  replaced by a placeholder in the tool text and sent as a follow-up ``user``
  message right after it.

The primary message always comes first and is dropped when it has neither
content nor tool calls.
"""

import json
from typing import Any

from chatwire.core.content import Content, ContentPart, ImageContent, TextContent
from chatwire.core.message import Message, ToolRequest, ToolResponse
from chatwire.wire.images import ImageFormat, convert_image
from chatwire.wire.names import sanitize_function_name

IMAGE_PLACEHOLDER = "This tool result included an image that is uploaded in the next message."


def messages_to_openai_spec(
    messages: list[Message],
    image_format: ImageFormat = ImageFormat.OPENAI,
) -> list[dict[str, Any]]:
    """Convert canonical messages to OpenAI's message format, preserving order."""
    spec: list[dict[str, Any]] = []
    for message in messages:
        spec.extend(_expand_message(message, image_format))
    return spec


def _expand_message(message: Message, image_format: ImageFormat) -> list[dict[str, Any]]:
    converted: dict[str, Any] = {"role": message.role}
    output: list[dict[str, Any]] = []

    for item in message.content:
        # Text and images overwrite "content": the last one wins.
        if isinstance(item, TextContent):
            if item.text:
                converted["content"] = item.text
        elif isinstance(item, ImageContent):
            converted["content"] = [convert_image(item, image_format)]
        elif isinstance(item, ToolRequest):
            _add_tool_request(item, converted, output)
        elif isinstance(item, ToolResponse):
            output.extend(_tool_response_messages(item, image_format))

    if "content" in converted or converted.get("tool_calls"):
        output.insert(0, converted)
    return output


def _add_tool_request(
    request: ToolRequest,
    converted: dict[str, Any],
    output: list[dict[str, Any]],
) -> None:
    if request.tool_call is None:
        # No call was made, so the error stands in for the tool's answer.
        output.append(
            {
                "role": "tool",
                "content": f"Error: {request.error}",
                "tool_call_id": request.id,
            }
        )
        return

    tool_call = request.tool_call
    converted.setdefault("tool_calls", []).append(
        {
            "id": request.id,
            "type": "function",
            "function": {
                "name": sanitize_function_name(tool_call.name),
                "arguments": json.dumps(
                    tool_call.arguments, separators=(",", ":"), ensure_ascii=False
                ),
            },
        }
    )


def _tool_response_messages(
    response: ToolResponse,
    image_format: ImageFormat,
) -> list[dict[str, Any]]:
    if response.tool_result is None:
        return [
            {
                "role": "tool",
                "content": f"The tool call returned the following error:\n{response.error}",
                "tool_call_id": response.id,
            }
        ]

    tool_content: list[ContentPart] = []
    image_messages: list[dict[str, Any]] = []
    for item in _visible_to_assistant(response.tool_result):
        if isinstance(item, ImageContent):
            tool_content.append(Content.from_text(IMAGE_PLACEHOLDER))
            image_messages.append(
                {"role": "user", "content": [convert_image(item, image_format)]}
            )
        else:
            tool_content.append(item)

    # Non-text items contribute an empty string but still get a separator.
    text = " ".join(item.text if isinstance(item, TextContent) else "" for item in tool_content)
    return [
        {"role": "tool", "content": text, "tool_call_id": response.id},
        *image_messages,
    ]


def _visible_to_assistant(contents: list[ContentPart]) -> list[ContentPart]:
    """Keep items meant for the assistant, with their annotations stripped."""
    return [
        item.unannotated()
        for item in contents
        if item.audience() is None or "assistant" in item.audience()  # type: ignore[operator]
    ]
