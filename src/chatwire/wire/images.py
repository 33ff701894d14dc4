"""Image content encoding.

Some OpenAI-compatible endpoints expect the Anthropic image block inside an
otherwise OpenAI-shaped message, so the image encoding is selectable.
"""

from enum import Enum
from typing import Any

from chatwire.core.content import ImageContent


class ImageFormat(str, Enum):
    """Wire encoding for inline image bytes."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"


def convert_image(image: ImageContent, image_format: ImageFormat) -> dict[str, Any]:
    """Encode an image content item as a message content block."""
    if image_format is ImageFormat.ANTHROPIC:
        return {
            "type": "image",
            "source": {
                "type": "base64",
                "media_type": image.mime_type,
                "data": image.data,
            },
        }
    return {
        "type": "image_url",
        "image_url": {"url": f"data:{image.mime_type};base64,{image.data}"},
    }
