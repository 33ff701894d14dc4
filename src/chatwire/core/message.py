"""Canonical conversation messages consumed and produced by the wire layer.

A :class:`Message` is one turn: a role, a creation timestamp and an ordered
list of content items. Besides plain text and images, a message can carry
tool requests (emitted by the assistant) and tool responses (sent back by the
runtime). Both tool items hold either a success value or an
:class:`AgentError`, never both.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from chatwire.core.content import Content, ContentPart, ImageContent, Role, TextContent


def utc_timestamp() -> int:
    """Current wall-clock time as whole unix seconds."""
    return int(datetime.now(timezone.utc).timestamp())


# ---------------------------------------------------------------------------
# Agent errors — recorded on a tool item instead of being raised
# ---------------------------------------------------------------------------


class AgentErrorKind(str, Enum):
    """Category of a failed tool call."""

    TOOL_NOT_FOUND = "tool_not_found"
    INVALID_PARAMETERS = "invalid_parameters"
    EXECUTION_ERROR = "execution_error"
    INTERNAL = "internal"


_ERROR_PREFIXES: dict[AgentErrorKind, str] = {
    AgentErrorKind.TOOL_NOT_FOUND: "Tool not found: ",
    AgentErrorKind.INVALID_PARAMETERS: "The parameters to the tool call were invalid: ",
    AgentErrorKind.EXECUTION_ERROR: "The tool failed during execution with the following output: \n",
    AgentErrorKind.INTERNAL: "Internal error: ",
}


class AgentError(BaseModel):
    """A failed tool call outcome."""

    model_config = ConfigDict(frozen=True)

    kind: AgentErrorKind
    message: str

    def __str__(self) -> str:
        return _ERROR_PREFIXES[self.kind] + self.message

    @classmethod
    def tool_not_found(cls, message: str) -> "AgentError":
        return cls(kind=AgentErrorKind.TOOL_NOT_FOUND, message=message)

    @classmethod
    def invalid_parameters(cls, message: str) -> "AgentError":
        return cls(kind=AgentErrorKind.INVALID_PARAMETERS, message=message)

    @classmethod
    def execution_error(cls, message: str) -> "AgentError":
        return cls(kind=AgentErrorKind.EXECUTION_ERROR, message=message)

    @classmethod
    def internal(cls, message: str) -> "AgentError":
        return cls(kind=AgentErrorKind.INTERNAL, message=message)


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


class ToolCall(BaseModel):
    """A function invocation: a tool name and its JSON arguments."""

    model_config = ConfigDict(frozen=True)

    name: str
    arguments: Any = Field(default_factory=dict)


class Tool(BaseModel):
    """A tool the model may call, described by a JSON Schema."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict)


class ToolRequest(BaseModel):
    """The assistant asked for a tool call, or tried to and failed."""

    model_config = ConfigDict(frozen=True)

    type: Literal["tool_request"] = "tool_request"
    id: str
    tool_call: ToolCall | None = None
    error: AgentError | None = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> "ToolRequest":
        if (self.tool_call is None) == (self.error is None):
            msg = "ToolRequest needs exactly one of tool_call or error"
            raise ValueError(msg)
        return self

    @property
    def ok(self) -> bool:
        return self.error is None


class ToolResponse(BaseModel):
    """The runtime's answer to a tool request: result content or an error."""

    model_config = ConfigDict(frozen=True)

    type: Literal["tool_response"] = "tool_response"
    id: str
    tool_result: list[ContentPart] | None = None
    error: AgentError | None = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> "ToolResponse":
        if (self.tool_result is None) == (self.error is None):
            msg = "ToolResponse needs exactly one of tool_result or error"
            raise ValueError(msg)
        return self

    @property
    def ok(self) -> bool:
        return self.error is None


MessageContent = Annotated[
    TextContent | ImageContent | ToolRequest | ToolResponse,
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Message
# ---------------------------------------------------------------------------


class Message(BaseModel):
    """One conversation turn.

    Builders return a new message::

        msg = Message.user().with_text("What is in this picture?").with_image(data, "image/png")
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    created: int = Field(default_factory=utc_timestamp)
    content: list[MessageContent] = Field(default_factory=list)

    @classmethod
    def user(cls) -> "Message":
        return cls(role="user")

    @classmethod
    def assistant(cls) -> "Message":
        return cls(role="assistant")

    @property
    def text(self) -> str:
        """Concatenated text of all text items."""
        return "".join(item.text for item in self.content if isinstance(item, TextContent))

    def with_content(self, item: MessageContent) -> "Message":
        return self.model_copy(update={"content": [*self.content, item]})

    def with_text(self, text: str) -> "Message":
        return self.with_content(Content.from_text(text))

    def with_image(self, data: str, mime_type: str) -> "Message":
        return self.with_content(Content.from_image(data, mime_type))

    def with_tool_request(self, id: str, outcome: ToolCall | AgentError) -> "Message":
        """Append a tool request holding either the call or the error that replaced it."""
        if isinstance(outcome, AgentError):
            return self.with_content(ToolRequest(id=id, error=outcome))
        return self.with_content(ToolRequest(id=id, tool_call=outcome))

    def with_tool_response(self, id: str, outcome: list[ContentPart] | AgentError) -> "Message":
        """Append a tool response holding either result content or an error."""
        if isinstance(outcome, AgentError):
            return self.with_content(ToolResponse(id=id, error=outcome))
        return self.with_content(ToolResponse(id=id, tool_result=list(outcome)))
