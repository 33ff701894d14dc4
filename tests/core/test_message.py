"""Tests for canonical messages, tool items and agent errors."""

import pytest
from pydantic import ValidationError

from chatwire.core.config import ModelConfig
from chatwire.core.content import Content, ImageContent, TextContent
from chatwire.core.message import (
    AgentError,
    AgentErrorKind,
    Message,
    ToolCall,
    ToolRequest,
    ToolResponse,
)


class TestAgentError:
    def test_kinds(self) -> None:
        assert AgentError.tool_not_found("x").kind == AgentErrorKind.TOOL_NOT_FOUND
        assert AgentError.invalid_parameters("x").kind == AgentErrorKind.INVALID_PARAMETERS
        assert AgentError.execution_error("x").kind == AgentErrorKind.EXECUTION_ERROR
        assert AgentError.internal("x").kind == AgentErrorKind.INTERNAL

    def test_str_has_kind_prefix(self) -> None:
        assert str(AgentError.tool_not_found("search")) == "Tool not found: search"
        assert str(AgentError.internal("boom")) == "Internal error: boom"


class TestToolItems:
    def test_request_needs_exactly_one_outcome(self) -> None:
        with pytest.raises(ValidationError):
            ToolRequest(id="1")
        with pytest.raises(ValidationError):
            ToolRequest(
                id="1",
                tool_call=ToolCall(name="a"),
                error=AgentError.internal("x"),
            )

    def test_response_needs_exactly_one_outcome(self) -> None:
        with pytest.raises(ValidationError):
            ToolResponse(id="1")

    def test_ok(self) -> None:
        assert ToolRequest(id="1", tool_call=ToolCall(name="a")).ok
        assert not ToolResponse(id="1", error=AgentError.internal("x")).ok

    def test_empty_result_is_success(self) -> None:
        assert ToolResponse(id="1", tool_result=[]).ok

    def test_response_accepts_mcp_tool_result(self) -> None:
        response = ToolResponse.model_validate(
            {
                "id": "1",
                "tool_result": [
                    {"type": "text", "text": "chart attached"},
                    {"type": "image", "data": "d", "mimeType": "image/png"},
                ],
            }
        )
        assert response.tool_result == [
            Content.from_text("chart attached"),
            Content.from_image("d", "image/png"),
        ]


class TestMessageBuilders:
    def test_user_with_text(self) -> None:
        msg = Message.user().with_text("Hello")
        assert msg.role == "user"
        assert len(msg.content) == 1
        assert isinstance(msg.content[0], TextContent)
        assert msg.text == "Hello"

    def test_builders_return_new_message(self) -> None:
        base = Message.assistant()
        extended = base.with_text("Hi").with_image("d", "image/png")
        assert base.content == []
        assert isinstance(extended.content[1], ImageContent)

    def test_tool_request_success_and_failure(self) -> None:
        msg = (
            Message.assistant()
            .with_tool_request("a", ToolCall(name="search", arguments={"q": "x"}))
            .with_tool_request("b", AgentError.tool_not_found("nope"))
        )
        first, second = msg.content
        assert isinstance(first, ToolRequest) and first.tool_call is not None
        assert first.tool_call.arguments == {"q": "x"}
        assert isinstance(second, ToolRequest) and second.error is not None

    def test_tool_response(self) -> None:
        msg = Message.user().with_tool_response("a", [Content.from_text("42")])
        item = msg.content[0]
        assert isinstance(item, ToolResponse)
        assert item.tool_result == [Content.from_text("42")]

    def test_created_defaults_to_now(self) -> None:
        assert Message.user().created > 0

    def test_validates_from_dicts(self) -> None:
        msg = Message.model_validate(
            {
                "role": "assistant",
                "created": 1,
                "content": [
                    {"type": "text", "text": "hi"},
                    {"type": "tool_request", "id": "1", "tool_call": {"name": "f", "arguments": {}}},
                ],
            }
        )
        assert isinstance(msg.content[1], ToolRequest)


class TestModelConfig:
    def test_defaults(self) -> None:
        config = ModelConfig(model_name="gpt-4o")
        assert config.temperature is None
        assert config.max_tokens is None

    def test_rejects_negative_temperature(self) -> None:
        with pytest.raises(ValidationError):
            ModelConfig(model_name="gpt-4o", temperature=-1.0)

    def test_rejects_zero_max_tokens(self) -> None:
        with pytest.raises(ValidationError):
            ModelConfig(model_name="gpt-4o", max_tokens=0)
