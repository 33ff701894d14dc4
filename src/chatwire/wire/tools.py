"""Tool definitions → OpenAI function-calling declarations."""

from typing import Any

from chatwire.core.message import Tool
from chatwire.errors import DuplicateToolNameError


def tools_to_openai_spec(tools: list[Tool]) -> list[dict[str, Any]]:
    """Convert tools to ``{"type": "function", "function": {...}}`` entries.

    Order is preserved. Tool names must be unique (exact match).

    Raises:
        DuplicateToolNameError: On the first repeated name; nothing is returned.
    """
    seen: set[str] = set()
    result: list[dict[str, Any]] = []
    for tool in tools:
        if tool.name in seen:
            raise DuplicateToolNameError(tool.name)
        seen.add(tool.name)
        result.append(
            {
                "type": "function",
                "function": {
                    "name": tool.name,
                    "description": tool.description,
                    "parameters": tool.input_schema,
                },
            }
        )
    return result
