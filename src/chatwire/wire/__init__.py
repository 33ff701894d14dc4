"""OpenAI-compatible wire format: encoding, decoding and classification."""

from chatwire.wire.context_length import (
    ContextLengthClassifier,
    check_bedrock_context_length_error,
    check_openai_context_length_error,
    classify_context_length_error,
)
from chatwire.wire.images import ImageFormat, convert_image
from chatwire.wire.messages import messages_to_openai_spec
from chatwire.wire.names import is_valid_function_name, sanitize_function_name
from chatwire.wire.request import create_openai_request_payload
from chatwire.wire.response import get_model, openai_response_to_message
from chatwire.wire.tools import tools_to_openai_spec
from chatwire.wire.transpiler import OpenAICompatTranspiler
from chatwire.wire.transport import HttpOutcome, handle_response
from chatwire.wire.unescape import unescape_json_values
from chatwire.wire.usage import get_openai_usage

__all__ = [
    "ContextLengthClassifier",
    "HttpOutcome",
    "ImageFormat",
    "OpenAICompatTranspiler",
    "check_bedrock_context_length_error",
    "check_openai_context_length_error",
    "classify_context_length_error",
    "convert_image",
    "create_openai_request_payload",
    "get_model",
    "get_openai_usage",
    "handle_response",
    "is_valid_function_name",
    "messages_to_openai_spec",
    "openai_response_to_message",
    "sanitize_function_name",
    "tools_to_openai_spec",
    "unescape_json_values",
]
