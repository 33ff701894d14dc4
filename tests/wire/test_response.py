"""Tests for OpenAI response → canonical message decoding."""

import copy
from typing import Any

import pytest

from chatwire.core.content import TextContent
from chatwire.core.message import AgentErrorKind, Message, ToolCall, ToolRequest
from chatwire.errors import ResponseFormatError
from chatwire.wire.messages import messages_to_openai_spec
from chatwire.wire.response import get_model, openai_response_to_message

TOOL_USE_RESPONSE: dict[str, Any] = {
    "choices": [
        {
            "role": "assistant",
            "message": {
                "tool_calls": [
                    {
                        "id": "1",
                        "function": {
                            "name": "example_fn",
                            "arguments": '{"param": "value"}',
                        },
                    }
                ]
            },
        }
    ],
    "usage": {"input_tokens": 10, "output_tokens": 25, "total_tokens": 35},
}


def _fixed_clock() -> int:
    return 1_700_000_000


def _tool_use_response(**function: Any) -> dict[str, Any]:
    response = copy.deepcopy(TOOL_USE_RESPONSE)
    response["choices"][0]["message"]["tool_calls"][0]["function"].update(function)
    return response


def _only_request(message: Message) -> ToolRequest:
    assert len(message.content) == 1
    item = message.content[0]
    assert isinstance(item, ToolRequest)
    return item


class TestTextResponses:
    def test_text(self) -> None:
        response = {"choices": [{"message": {"content": "Hello from John Cena!"}}]}
        message = openai_response_to_message(response, clock=_fixed_clock)
        assert message.role == "assistant"
        assert message.created == 1_700_000_000
        assert message.content == [TextContent(text="Hello from John Cena!")]

    def test_empty_text_is_kept(self) -> None:
        response = {"choices": [{"message": {"content": ""}}]}
        message = openai_response_to_message(response)
        assert message.content == [TextContent(text="")]

    def test_null_content_skipped(self) -> None:
        response = {"choices": [{"message": {"content": None}}]}
        assert openai_response_to_message(response).content == []

    def test_round_trip_text(self) -> None:
        original = Message.user().with_text("Same words")
        wire = messages_to_openai_spec([original])[0]
        decoded = openai_response_to_message({"choices": [{"message": wire}]})
        assert decoded.text == original.text


class TestToolCalls:
    def test_valid_tool_request(self) -> None:
        request = _only_request(openai_response_to_message(TOOL_USE_RESPONSE))
        assert request.id == "1"
        assert request.tool_call == ToolCall(name="example_fn", arguments={"param": "value"})

    def test_invalid_function_name(self) -> None:
        request = _only_request(openai_response_to_message(_tool_use_response(name="invalid fn")))
        assert request.error is not None
        assert request.error.kind == AgentErrorKind.TOOL_NOT_FOUND
        assert request.error.message.startswith("The provided function name 'invalid fn'")
        assert request.error.message.endswith("[a-zA-Z0-9_-]+")

    def test_invalid_json_arguments(self) -> None:
        response = _tool_use_response(arguments="invalid json {")
        request = _only_request(openai_response_to_message(response))
        assert request.error is not None
        assert request.error.kind == AgentErrorKind.INVALID_PARAMETERS
        assert request.error.message.startswith("Could not interpret tool use parameters for id 1")

    def test_missing_arguments_is_invalid(self) -> None:
        response = copy.deepcopy(TOOL_USE_RESPONSE)
        del response["choices"][0]["message"]["tool_calls"][0]["function"]["arguments"]
        request = _only_request(openai_response_to_message(response))
        assert request.error is not None
        assert request.error.kind == AgentErrorKind.INVALID_PARAMETERS

    def test_one_bad_call_does_not_affect_others(self) -> None:
        response = {
            "choices": [
                {
                    "message": {
                        "content": "Working on it",
                        "tool_calls": [
                            {"id": "a", "function": {"name": "bad name", "arguments": "{}"}},
                            {"id": "b", "function": {"name": "good", "arguments": '{"x": 1}'}},
                        ],
                    }
                }
            ]
        }
        message = openai_response_to_message(response)
        text, bad, good = message.content
        assert isinstance(text, TextContent)
        assert isinstance(bad, ToolRequest) and not bad.ok
        assert isinstance(good, ToolRequest) and good.tool_call == ToolCall(name="good", arguments={"x": 1})

    def test_scalar_arguments_accepted(self) -> None:
        request = _only_request(openai_response_to_message(_tool_use_response(arguments="42")))
        assert request.tool_call is not None
        assert request.tool_call.arguments == 42


class TestMalformedResponses:
    @pytest.mark.parametrize(
        "response",
        [{}, {"choices": []}, {"choices": [{}]}, {"choices": [{"message": "text"}]}],
    )
    def test_missing_message(self, response: dict[str, Any]) -> None:
        with pytest.raises(ResponseFormatError):
            openai_response_to_message(response)


class TestGetModel:
    def test_present(self) -> None:
        assert get_model({"model": "gpt-4o"}) == "gpt-4o"

    def test_missing_or_not_a_string(self) -> None:
        assert get_model({}) == "Unknown"
        assert get_model({"model": 4}) == "Unknown"
