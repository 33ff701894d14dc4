"""chatwire — canonical conversations to and from OpenAI-compatible chat APIs."""

from chatwire.core import (
    AgentError,
    Annotations,
    Content,
    ImageContent,
    Message,
    ModelConfig,
    TextContent,
    Tool,
    ToolCall,
    ToolRequest,
    ToolResponse,
    Usage,
)
from chatwire.errors import (
    ChatwireError,
    ContextLengthExceededError,
    DuplicateToolNameError,
    MissingUsageDataError,
    ProviderError,
    RequestFailedError,
    ResponseFormatError,
    RetryableServerError,
    TransportError,
)
from chatwire.wire import HttpOutcome, ImageFormat, OpenAICompatTranspiler

__version__ = "0.1.0"

__all__ = [
    "AgentError",
    "Annotations",
    "ChatwireError",
    "Content",
    "ContextLengthExceededError",
    "DuplicateToolNameError",
    "HttpOutcome",
    "ImageContent",
    "ImageFormat",
    "Message",
    "MissingUsageDataError",
    "ModelConfig",
    "OpenAICompatTranspiler",
    "ProviderError",
    "RequestFailedError",
    "ResponseFormatError",
    "RetryableServerError",
    "TextContent",
    "Tool",
    "ToolCall",
    "ToolRequest",
    "ToolResponse",
    "TransportError",
    "Usage",
]
