"""Tests for the provider descriptor and interactive setup."""

from llamafarm_bridge.endpoints import normalize_base_url, validate_base_url
from llamafarm_bridge.provider import create_provider


class ScriptedPrompter:
    """Answers prompts from a list and records what was asked."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.asked = []

    def text(self, message, initial_value="", validate=None):
        self.asked.append((message, initial_value))
        answer = self.answers.pop(0)
        if validate is not None:
            assert validate(answer) is None, f"answer {answer!r} rejected for {message!r}"
        return answer


class AuthContext:
    def __init__(self, prompter):
        self.prompter = prompter


def test_normalize_base_url():
    assert normalize_base_url("  http://localhost:8000/ ") == "http://localhost:8000"
    assert normalize_base_url("") == "http://localhost:8000"


def test_validate_base_url():
    assert validate_base_url("http://localhost:8000") is None
    assert validate_base_url("https://farm.example.com/") is None
    assert validate_base_url("not a url") == "Enter a valid URL"
    assert validate_base_url("ftp://localhost") == "Enter a valid URL"


def test_provider_descriptor(bridge_settings):
    provider = create_provider(bridge_settings)
    assert provider.id == "llamafarm"
    assert provider.label == "LlamaFarm"
    assert provider.aliases == ["llama-farm", "lf"]
    assert provider.auth[0].id == "local"
    assert provider.auth[0].kind == "custom"


def test_local_auth_flow(bridge_settings, server):
    provider = create_provider(bridge_settings, transport=server.transport())
    prompter = ScriptedPrompter(["http://llamafarm.test/", " moltbot ", "agent", "qwen3-8b"])

    result = provider.auth[0].run(AuthContext(prompter))

    assert [message for message, _ in prompter.asked] == [
        "LlamaFarm server URL",
        "LlamaFarm namespace",
        "LlamaFarm project name",
        "Model name",
    ]
    assert prompter.asked[0][1] == "http://llamafarm.test"
    assert result.default_model == "llamafarm/qwen3-8b"
    assert result.profiles[0].profile_id == "llamafarm:local"
    provider_patch = result.config_patch["models"]["providers"]["llamafarm"]
    assert provider_patch["baseUrl"] == "http://llamafarm.test/v1/projects/moltbot/agent"
    assert provider_patch["models"][0]["id"] == "qwen3-8b"
    assert "llamafarm/qwen3-8b" in result.config_patch["agents"]["defaults"]["models"]
    assert result.notes[0] == "Server is healthy at http://llamafarm.test"
    assert any("variables field" in note for note in result.notes)


def test_local_auth_flow_warns_when_offline(bridge_settings, offline_transport):
    provider = create_provider(bridge_settings, transport=offline_transport)
    prompter = ScriptedPrompter(["http://llamafarm.test", "moltbot", "agent", "qwen3-8b"])

    result = provider.auth[0].run(AuthContext(prompter))

    assert result.notes[0].startswith("Warning:")
