"""Template documents and control-file content for a new Moltbot workspace."""

from datetime import date
from pathlib import Path
from typing import Any, Optional

from llamafarm_bridge.config import Settings
from llamafarm_bridge.endpoints import build_chat_endpoint

PROVIDER_ID = "llamafarm"
PROVIDER_API = "openai-completions"

GATEWAY_PORT = 3332
DEFAULT_CONTEXT_WINDOW = 32_000
DEFAULT_MAX_TOKENS = 8192

SOUL_TEMPLATE = """# Soul

You are an AI assistant powered by LlamaFarm, running locally via Qwen.

## Core Identity

- You are helpful, harmless, and honest
- You provide thoughtful, well-reasoned responses
- You acknowledge when you don't know something
- You prioritize the user's needs and safety

## Capabilities

- Local LLM inference (no cloud dependency)
- Tool usage for notifications, controls, and actions
- Memory persistence across conversations

## Communication Style

- Clear and concise
- Professional yet friendly
- Technical when needed, accessible when possible
"""

AGENTS_TEMPLATE = """# Agents

This workspace uses LlamaFarm for local LLM inference.

## Primary Agent

- **Model**: {model_name} via LlamaFarm Universal Runtime
- **Provider**: LlamaFarm (OpenAI-compatible API)
- **Endpoint**: {server_url}

## Agent Behavior

The agent processes messages through the LlamaFarm API, which routes to the
configured model. System prompts and tools are passed via the variables field.
"""

TOOLS_TEMPLATE = """# Tools

Available tools for the LlamaFarm agent.

## Mock Skills (Development)

These mock tools are available for testing:

### llamafarm-notify
Send notifications (mock implementation).
- **Parameters**: message (string), level (info|warn|error), title (optional)
- **Returns**: Confirmation of notification sent

### llamafarm-control
Control actions (mock implementation).
- **Parameters**: action (string), target (string), options (optional object)
- **Returns**: Action execution result

### llamafarm-move
Movement/navigation (mock implementation).
- **Parameters**: destination (string), speed (slow|normal|fast), path (optional)
- **Returns**: Navigation result

## Adding Real Tools

Replace mock tools with real implementations by:
1. Subclassing `BaseTool` in `llamafarm_bridge/tools/`
2. Registering the instance on the `ToolRegistry`
3. Keeping parameter models JSON-schema serializable
"""

USER_TEMPLATE = """# User Profile

The user interacting with this agent.

## Preferences

- Response style: Clear and concise
- Technical level: Adaptable
- Language: English

## Notes

Add user-specific notes here as the relationship develops.
"""

IDENTITY_TEMPLATE = """# Identity

## Agent Name
LlamaFarm Assistant

## Description
A locally-running AI assistant powered by LlamaFarm and Qwen.

## Version
1.0.0

## Created
{created}
"""

MEMORY_TEMPLATE = """# Memory

Persistent memory for the LlamaFarm agent.

## Important Facts

(Facts learned during conversations will be stored here)

## User Preferences

(Preferences expressed by the user will be tracked here)

## Context

(Important context for ongoing work will be recorded here)
"""


def render_templates(config: Settings, today: Optional[date] = None) -> list[tuple[str, str]]:
    """
    Render the workspace documents in write order.

    Returns:
        List of (filename, content) pairs.
    """
    today = today or date.today()
    return [
        ("SOUL.md", SOUL_TEMPLATE),
        ("AGENTS.md", AGENTS_TEMPLATE.format(model_name=config.model_name, server_url=config.server_url)),
        ("TOOLS.md", TOOLS_TEMPLATE),
        ("USER.md", USER_TEMPLATE),
        ("IDENTITY.md", IDENTITY_TEMPLATE.format(created=today.isoformat())),
        ("MEMORY.md", MEMORY_TEMPLATE),
    ]


def build_model_definition(model_id: str, context_window: int = DEFAULT_CONTEXT_WINDOW) -> dict[str, Any]:
    """Model entry as the agent host expects it in its provider config."""
    return {
        "id": model_id,
        "name": model_id,
        "api": PROVIDER_API,
        "reasoning": False,
        "input": ["text"],
        "cost": {"input": 0, "output": 0, "cacheRead": 0, "cacheWrite": 0},
        "contextWindow": context_window,
        "maxTokens": DEFAULT_MAX_TOKENS,
    }


def generate_control_config(config: Settings, workspace_dir: Path) -> dict[str, Any]:
    """Generate the moltbot.json content routing the agent host to the LlamaFarm project."""
    return {
        "gateway": {
            "port": GATEWAY_PORT,
            "mode": "local",
        },
        "agents": {
            "defaults": {
                "workspace": str(workspace_dir),
            },
        },
        "models": {
            "providers": {
                PROVIDER_ID: {
                    "baseUrl": build_chat_endpoint(config.server_url, config.namespace, config.project),
                    "api": PROVIDER_API,
                    "authHeader": False,
                    "models": [build_model_definition(config.model_name)],
                },
            },
        },
    }
