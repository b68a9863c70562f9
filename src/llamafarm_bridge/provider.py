"""LlamaFarm model provider for the agent host (OpenAI-compatible API)."""

from typing import Callable, Optional

import httpx
import structlog

from llamafarm_bridge.client import LlamaFarmClient
from llamafarm_bridge.config import Settings, get_settings
from llamafarm_bridge.endpoints import build_chat_endpoint, normalize_base_url, validate_base_url
from llamafarm_bridge.host import (
    AuthProfile,
    ProviderAuthContext,
    ProviderAuthMethod,
    ProviderAuthResult,
    ProviderPlugin,
)
from llamafarm_bridge.templates import PROVIDER_API, PROVIDER_ID, build_model_definition

logger = structlog.get_logger(__name__)

PROVIDER_LABEL = "LlamaFarm"
PROVIDER_ALIASES = ["llama-farm", "lf"]
DOCS_PATH = "/providers/models"


def _require(label: str) -> Callable[[str], Optional[str]]:
    def validate(value: str) -> Optional[str]:
        return None if value.strip() else f"Enter a {label}"

    return validate


class LocalServerAuth:
    """Collect server, project and model settings for a local LlamaFarm server."""

    def __init__(self, config: Settings, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self._transport = transport

    def __call__(self, ctx: ProviderAuthContext) -> ProviderAuthResult:
        prompter = ctx.prompter
        server_url = normalize_base_url(
            prompter.text("LlamaFarm server URL", self.config.server_url, validate_base_url)
        )
        namespace = prompter.text("LlamaFarm namespace", self.config.namespace, _require("namespace")).strip()
        project = prompter.text("LlamaFarm project name", self.config.project, _require("project name")).strip()
        model_name = prompter.text("Model name", self.config.model_name, _require("model name")).strip()

        base_url = build_chat_endpoint(server_url, namespace, project)
        default_model_ref = f"{PROVIDER_ID}/{model_name}"

        client = LlamaFarmClient(
            server_url=server_url,
            namespace=namespace,
            project=project,
            timeout=self.config.request_timeout,
            transport=self._transport,
        )
        if client.is_healthy():
            health_note = f"Server is healthy at {server_url}"
        else:
            health_note = f"Warning: Server at {server_url} is not responding"
        logger.info("Provider configured", server_url=server_url, project=f"{namespace}/{project}")

        return ProviderAuthResult(
            profiles=[
                AuthProfile(
                    profile_id=f"{PROVIDER_ID}:local",
                    # LlamaFarm does not require auth by default
                    credential={"type": "token", "provider": PROVIDER_ID, "token": "n/a"},
                )
            ],
            config_patch={
                "models": {
                    "providers": {
                        PROVIDER_ID: {
                            "baseUrl": base_url,
                            "apiKey": "n/a",
                            "api": PROVIDER_API,
                            "authHeader": False,
                            "models": [build_model_definition(model_name)],
                        },
                    },
                },
                "agents": {"defaults": {"models": {default_model_ref: {}}}},
            },
            default_model=default_model_ref,
            notes=[
                health_note,
                f"Configured to use {namespace}/{project} project",
                "LlamaFarm provides local LLM inference via Qwen, Llama, and other models.",
                "Pass system_prompt and tools_context via the variables field for dynamic prompts.",
            ],
        )


def create_provider(
    config: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> ProviderPlugin:
    """Create the provider descriptor registered with the agent host."""
    config = config or get_settings()
    return ProviderPlugin(
        id=PROVIDER_ID,
        label=PROVIDER_LABEL,
        docs_path=DOCS_PATH,
        aliases=list(PROVIDER_ALIASES),
        auth=[
            ProviderAuthMethod(
                id="local",
                label="Local LlamaFarm Server",
                hint="Connect to a running LlamaFarm server",
                kind="custom",
                run=LocalServerAuth(config, transport),
            )
        ],
    )
