"""CLI entry point for the LlamaFarm bridge."""

import json
import sys
from pathlib import Path

import click

from llamafarm_bridge.chat import chat_with_defaults
from llamafarm_bridge.client import LlamaFarmClient, TransportError
from llamafarm_bridge.config import Settings, get_settings
from llamafarm_bridge.reconciler import ProjectReconciler
from llamafarm_bridge.schemas.chat import ChatMessage, ChatOptions
from llamafarm_bridge.schemas.workspace import WorkspaceLayout
from llamafarm_bridge.tools import default_registry
from llamafarm_bridge.utils.logging_setup import setup_logging
from llamafarm_bridge.workspace import WorkspaceMaterializer


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.option("--server-url", envvar="LLAMAFARM_SERVER_URL", help="LlamaFarm server URL")
@click.option("--namespace", envvar="LLAMAFARM_NAMESPACE", help="Project namespace")
@click.option("--project", envvar="LLAMAFARM_PROJECT", help="Project name")
@click.pass_context
def main(ctx: click.Context, verbose: bool, server_url: str | None, namespace: str | None, project: str | None):
    """LlamaFarm bridge - connect Moltbot to a local LlamaFarm server."""
    overrides = {
        key: value
        for key, value in {"server_url": server_url, "namespace": namespace, "project": project}.items()
        if value
    }
    if verbose:
        overrides["log_level"] = "DEBUG"
    config = get_settings(**overrides)
    setup_logging(config)
    ctx.obj = config


def _client(ctx: click.Context) -> LlamaFarmClient:
    return LlamaFarmClient.from_settings(ctx.obj)


@main.command()
@click.pass_context
def health(ctx: click.Context):
    """Check server health."""
    client = _client(ctx)
    try:
        status = client.health()
    except TransportError as e:
        click.echo(f"Could not reach LlamaFarm server at {client.server_url}: {e}", err=True)
        sys.exit(1)

    click.echo(f"Server: {client.server_url}")
    click.echo(f"  Status: {status.status}")
    if status.summary:
        click.echo(f"  Summary: {status.summary}")
    for component in status.components:
        line = f"  - {component.name}: {component.status}"
        if component.message:
            line += f" ({component.message})"
        click.echo(line)
    if not status.is_healthy:
        sys.exit(1)


@main.command()
@click.option("--model-name", "-m", help="Model name to configure (default: settings)")
@click.pass_context
def bootstrap(ctx: click.Context, model_name: str | None):
    """Create or update the project on the server."""
    config: Settings = ctx.obj
    reconciler = ProjectReconciler(_client(ctx), model_name or config.model_name)
    result = reconciler.reconcile()

    click.echo(f"Project: {result.namespace}/{result.project}")
    click.echo(f"  Server healthy: {'Yes' if result.server_healthy else 'No'}")
    click.echo(f"  Created: {'Yes' if result.created else 'No'}")
    if result.error:
        click.echo(f"  Error: {result.error}", err=True)
        sys.exit(1)


@main.command()
@click.pass_context
def project(ctx: click.Context):
    """Show the remote project configuration."""
    config = ProjectReconciler(_client(ctx), ctx.obj.model_name).get_project_config()
    if config is None:
        click.echo("Project not found (or server unreachable).", err=True)
        sys.exit(1)
    click.echo(config.model_dump_json(indent=2, exclude_none=True))


@main.command()
@click.pass_context
def models(ctx: click.Context):
    """List models available to the project."""
    try:
        names = _client(ctx).list_models()
    except TransportError as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    for name in names:
        click.echo(name)


@main.command()
@click.argument("message")
@click.option("--system", "system_prompt", help="System prompt override (sent as a variable)")
@click.option("--temperature", type=float, help="Sampling temperature (default: 0.7)")
@click.option("--max-tokens", type=int, help="Maximum output tokens (default: 1000)")
@click.option("--with-tools", is_flag=True, help="Pass mock tool schemas with the request")
@click.pass_context
def chat(
    ctx: click.Context,
    message: str,
    system_prompt: str | None,
    temperature: float | None,
    max_tokens: int | None,
    with_tools: bool,
):
    """Send one user message and print the reply."""
    options = ChatOptions(system_prompt=system_prompt, temperature=temperature, max_tokens=max_tokens)
    if with_tools:
        registry = default_registry()
        options.tools = registry.schemas()
        options.variables["tools_context"] = registry.serialize_for_context()

    try:
        response = chat_with_defaults(_client(ctx), [ChatMessage(role="user", content=message)], options)
    except TransportError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    if response.content is None and response.choices and response.choices[0].message.tool_calls:
        click.echo(json.dumps(response.choices[0].message.tool_calls, indent=2))
    else:
        click.echo(response.content or "")


@main.command()
def tools():
    """Print tool schemas in OpenAI function format."""
    click.echo(default_registry().serialize_for_context())


@main.command()
@click.option(
    "--state-dir",
    "-d",
    type=click.Path(file_okay=False, path_type=Path),
    help="State directory (default: $MOLTBOT_STATE_DIR or ~/.llamafarm/moltbot-workspace)",
)
@click.pass_context
def init(ctx: click.Context, state_dir: Path | None):
    """Create the Moltbot workspace and moltbot.json (first run only)."""
    config: Settings = ctx.obj
    layout = WorkspaceLayout.at(state_dir or config.state_dir)
    result = WorkspaceMaterializer(layout, config).materialize()

    if result.created:
        click.echo(f"Workspace created: {result.workspace_dir}")
        for name in result.templates_copied:
            click.echo(f"  {name}")
        click.echo(f"Config: {result.config_path}")
    else:
        click.echo(f"Workspace already exists: {result.config_path}")


@main.command("show-config")
@click.option("--state-dir", "-d", type=click.Path(file_okay=False, path_type=Path), help="State directory")
@click.pass_context
def show_config(ctx: click.Context, state_dir: Path | None):
    """Print the generated moltbot.json."""
    config: Settings = ctx.obj
    layout = WorkspaceLayout.at(state_dir or config.state_dir)
    data = WorkspaceMaterializer(layout, config).read_control_config()
    if data is None:
        click.echo(f"No moltbot.json at {layout.config_path}", err=True)
        sys.exit(1)
    click.echo(json.dumps(data, indent=2))


if __name__ == "__main__":
    main()
