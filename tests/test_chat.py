"""Tests for chat request construction."""

import pytest

from llamafarm_bridge.chat import build_chat_request, chat_with_defaults
from llamafarm_bridge.client import TransportError
from llamafarm_bridge.endpoints import build_chat_endpoint
from llamafarm_bridge.schemas.chat import ChatMessage, ChatOptions
from llamafarm_bridge.tools import default_registry

MESSAGES = [{"role": "user", "content": "What's the weather?"}]


def test_defaults():
    request = build_chat_request(MESSAGES)
    assert request.stream is False
    assert request.temperature == 0.7
    assert request.max_tokens == 1000
    assert request.rag_enabled is False
    assert request.variables is None
    assert request.tools is None


def test_options_override_defaults():
    request = build_chat_request(MESSAGES, ChatOptions(stream=True, temperature=0.0, max_tokens=50))
    assert request.stream is True
    assert request.temperature == 0.0
    assert request.max_tokens == 50


def test_rag_always_disabled():
    request = build_chat_request(MESSAGES, ChatOptions(variables={"rag_enabled": True}))
    assert request.rag_enabled is False
    assert request.model_dump()["rag_enabled"] is False


def test_system_prompt_goes_into_variables():
    request = build_chat_request(MESSAGES, ChatOptions(system_prompt="You are a pirate."))
    assert request.variables == {"system_prompt": "You are a pirate."}
    assert [m.role for m in request.messages] == ["user"]


def test_empty_system_prompt_adds_no_variables():
    request = build_chat_request(MESSAGES, ChatOptions(system_prompt=""))
    assert request.variables is None


def test_system_prompt_wins_over_variable_of_same_name():
    options = ChatOptions(system_prompt="override", variables={"system_prompt": "other", "tools_context": "[]"})
    request = build_chat_request(MESSAGES, options)
    assert request.variables == {"system_prompt": "override", "tools_context": "[]"}


def test_accepts_message_models():
    request = build_chat_request([ChatMessage(role="system", content="x"), ChatMessage(role="user", content="y")])
    assert [m.content for m in request.messages] == ["x", "y"]


def test_rejects_unknown_role():
    with pytest.raises(ValueError):
        build_chat_request([{"role": "tool", "content": "x"}])


def test_build_chat_endpoint():
    assert (
        build_chat_endpoint("http://localhost:8000", "moltbot", "agent")
        == "http://localhost:8000/v1/projects/moltbot/agent"
    )


def test_build_chat_endpoint_custom_server():
    assert (
        build_chat_endpoint("http://192.168.1.100:9000", "ns", "proj")
        == "http://192.168.1.100:9000/v1/projects/ns/proj"
    )


def test_chat_with_defaults_sends_rag_disabled(server, client):
    server.add_project("moltbot", "agent")

    response = chat_with_defaults(client, MESSAGES, ChatOptions(system_prompt="Be brief."))

    assert response.content == "Hello from LlamaFarm"
    body = server.chat_bodies[0]
    assert body["rag_enabled"] is False
    assert body["variables"] == {"system_prompt": "Be brief."}
    assert body["messages"] == MESSAGES


def test_chat_with_tools(server, client):
    server.add_project("moltbot", "agent")
    registry = default_registry()
    options = ChatOptions(
        tools=registry.schemas(),
        variables={"tools_context": registry.serialize_for_context()},
    )

    chat_with_defaults(client, MESSAGES, options)

    body = server.chat_bodies[0]
    assert len(body["tools"]) == 3
    assert "llamafarm-notify" in body["variables"]["tools_context"]


def test_chat_with_defaults_propagates_errors(client):
    # Project was never created: the server answers 404
    with pytest.raises(TransportError) as exc_info:
        chat_with_defaults(client, MESSAGES)
    assert exc_info.value.status_code == 404
