"""Content values: a single unit of text or image plus optional annotations.

Content models are frozen. The ``with_*`` builders return a new value and
leave the receiver untouched, so a content item can be shared between
messages without one holder seeing another's annotations.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Role = Literal["user", "assistant", "system"]


class Annotations(BaseModel):
    """Who a content item is meant for, and how important it is.

    ``audience=None`` means visible to every role.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    audience: tuple[Role, ...] | None = None
    priority: float | None = Field(default=None, ge=0.0, le=1.0)


class Content(BaseModel):
    """Base for the text and image content variants.

    Fields also accept the camelCase names used by MCP tool results
    (``mimeType``); dump with ``by_alias=True`` to produce them.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    annotations: Annotations | None = None

    @staticmethod
    def from_text(text: str) -> "TextContent":
        """Create an unannotated text content item."""
        return TextContent(text=text)

    @staticmethod
    def from_image(data: str, mime_type: str) -> "ImageContent":
        """Create an unannotated image content item from base64 ``data``."""
        return ImageContent(data=data, mime_type=mime_type)

    def with_audience(self, audience: list[Role] | tuple[Role, ...]) -> "ContentPart":
        """Return a copy restricted to ``audience``, keeping any priority."""
        current = self.annotations or Annotations()
        annotations = Annotations(audience=tuple(audience), priority=current.priority)
        return self.model_copy(update={"annotations": annotations})  # type: ignore[return-value]

    def with_priority(self, priority: float) -> "ContentPart":
        """Return a copy with ``priority`` set, keeping any audience.

        Raises:
            ValueError: If ``priority`` is outside ``[0.0, 1.0]``.
        """
        if not 0.0 <= priority <= 1.0:
            msg = "Priority must be between 0.0 and 1.0"
            raise ValueError(msg)
        current = self.annotations or Annotations()
        annotations = Annotations(audience=current.audience, priority=priority)
        return self.model_copy(update={"annotations": annotations})  # type: ignore[return-value]

    def audience(self) -> tuple[Role, ...] | None:
        return self.annotations.audience if self.annotations else None

    def priority(self) -> float | None:
        return self.annotations.priority if self.annotations else None

    def unannotated(self) -> "ContentPart":
        """Return an equal copy with annotations stripped."""
        return self.model_copy(update={"annotations": None})  # type: ignore[return-value]

    def as_text(self) -> str | None:
        return None

    def as_image(self) -> tuple[str, str] | None:
        return None


class TextContent(Content):
    """Plain text. ``text`` may be empty."""

    type: Literal["text"] = "text"
    text: str

    def as_text(self) -> str | None:
        return self.text


class ImageContent(Content):
    """Inline image as base64 ``data``. The data is passed through unchecked."""

    type: Literal["image"] = "image"
    data: str
    mime_type: str

    def as_image(self) -> tuple[str, str] | None:
        return self.data, self.mime_type


ContentPart = Annotated[TextContent | ImageContent, Field(discriminator="type")]
