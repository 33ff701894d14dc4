"""Undo literal escape sequences left in model-generated JSON strings."""

from typing import Any

# Doubly-escaped forms first, or the single pass would leave a stray backslash.
_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("\\\\n", "\n"),
    ("\\\\t", "\t"),
    ("\\\\r", "\r"),
    ('\\\\"', '"'),
    ("\\n", "\n"),
    ("\\t", "\t"),
    ("\\r", "\r"),
    ('\\"', '"'),
)


def unescape_json_values(value: Any) -> Any:
    """Return a copy of ``value`` with escapes in every string leaf unescaped.

    Dicts and lists are rebuilt with their keys and order preserved; numbers,
    booleans and ``None`` are returned unchanged.
    """
    if isinstance(value, dict):
        return {key: unescape_json_values(item) for key, item in value.items()}
    if isinstance(value, list):
        return [unescape_json_values(item) for item in value]
    if isinstance(value, str):
        for escaped, literal in _REPLACEMENTS:
            value = value.replace(escaped, literal)
        return value
    return value
