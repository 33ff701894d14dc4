"""Tool function names on the wire must match ``[a-zA-Z0-9_-]+``.

Outgoing names are repaired with :func:`sanitize_function_name`. Incoming
names are only checked with :func:`is_valid_function_name`: a repaired name
could no longer be matched against the tool registry, so invalid ones are
rejected instead.
"""

import re

FUNCTION_NAME_PATTERN = "[a-zA-Z0-9_-]+"

_INVALID_CHAR = re.compile(r"[^a-zA-Z0-9_-]")
_VALID_NAME = re.compile(FUNCTION_NAME_PATTERN)


def sanitize_function_name(name: str) -> str:
    """Replace each disallowed character with ``_``. Length is preserved."""
    return _INVALID_CHAR.sub("_", name)


def is_valid_function_name(name: str) -> bool:
    """True if the whole (non-empty) name uses only allowed characters."""
    return _VALID_NAME.fullmatch(name) is not None
