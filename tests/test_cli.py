"""Tests for CLI commands that do not need a running server."""

import json

from click.testing import CliRunner

from llamafarm_bridge.cli import main


def test_tools_prints_schemas(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(main, ["tools"])
    assert result.exit_code == 0
    schemas = json.loads(result.output)
    assert [s["function"]["name"] for s in schemas] == ["llamafarm-notify", "llamafarm-control", "llamafarm-move"]


def test_init_creates_workspace_once(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    state_dir = tmp_path / "state"
    runner = CliRunner()

    first = runner.invoke(main, ["init", "--state-dir", str(state_dir)])
    second = runner.invoke(main, ["init", "--state-dir", str(state_dir)])

    assert first.exit_code == 0
    assert "Workspace created" in first.output
    assert "MEMORY.md" in first.output
    assert (state_dir / "moltbot.json").is_file()
    assert second.exit_code == 0
    assert "already exists" in second.output


def test_show_config_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(main, ["show-config", "--state-dir", str(tmp_path / "nothing")])
    assert result.exit_code == 1
