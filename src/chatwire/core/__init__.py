"""Canonical value model: content, messages, tools, usage and model config."""

from chatwire.core.config import ModelConfig
from chatwire.core.content import Annotations, Content, ContentPart, ImageContent, Role, TextContent
from chatwire.core.message import (
    AgentError,
    AgentErrorKind,
    Message,
    MessageContent,
    Tool,
    ToolCall,
    ToolRequest,
    ToolResponse,
    utc_timestamp,
)
from chatwire.core.usage import Usage

__all__ = [
    "AgentError",
    "AgentErrorKind",
    "Annotations",
    "Content",
    "ContentPart",
    "ImageContent",
    "Message",
    "MessageContent",
    "ModelConfig",
    "Role",
    "TextContent",
    "Tool",
    "ToolCall",
    "ToolRequest",
    "ToolResponse",
    "Usage",
    "utc_timestamp",
]
