"""Registration entry point called by the agent host."""

from typing import Any, Optional

import httpx
import structlog
from pydantic import ValidationError

from llamafarm_bridge.client import LlamaFarmClient
from llamafarm_bridge.config import Settings, get_settings
from llamafarm_bridge.host import PluginApi, PluginService, ServiceContext
from llamafarm_bridge.provider import create_provider
from llamafarm_bridge.reconciler import ProjectReconciler

logger = structlog.get_logger(__name__)

PLUGIN_ID = "llamafarm"
PLUGIN_NAME = "LlamaFarm"
PLUGIN_VERSION = "2026.1.30"

HEALTH_SERVICE_ID = "llamafarm-health"

# Host plugin config keys -> Settings fields
PLUGIN_CONFIG_KEYS = {
    "serverUrl": "server_url",
    "namespace": "namespace",
    "project": "project",
    "modelName": "model_name",
    "autoBootstrap": "auto_bootstrap",
}


def settings_from_plugin_config(plugin_config: Optional[dict[str, Any]]) -> Settings:
    """Merge the host's plugin config over environment/default settings."""
    overrides = {
        field: plugin_config[key]
        for key, field in PLUGIN_CONFIG_KEYS.items()
        if plugin_config and plugin_config.get(key) is not None
    }
    return get_settings(**overrides)


class HealthService:
    """Startup service: check server health and, if enabled, reconcile the project."""

    def __init__(self, config: Settings, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self._transport = transport

    def start(self, ctx: ServiceContext) -> None:
        client = LlamaFarmClient.from_settings(self.config, transport=self._transport)
        project = f"{self.config.namespace}/{self.config.project}"

        if client.is_healthy():
            ctx.logger.info(f"LlamaFarm server healthy at {self.config.server_url} ({project})")
        else:
            ctx.logger.warning(f"LlamaFarm server at {self.config.server_url} is not healthy")
            return

        if not self.config.auto_bootstrap:
            return

        result = ProjectReconciler(client, self.config.model_name).reconcile()
        if result.ok:
            action = "created" if result.created else "updated"
            ctx.logger.info(f"LlamaFarm project {project} {action}")
        else:
            ctx.logger.warning(f"LlamaFarm project {project} bootstrap failed: {result.error}")


def register(api: PluginApi, transport: Optional[httpx.BaseTransport] = None) -> Settings:
    """
    Register the LlamaFarm service, lifecycle hook and provider with the host.

    An invalid host config is logged as a warning and the defaults are used
    instead; registration never aborts host startup.

    Returns:
        The resolved settings.
    """
    try:
        config = settings_from_plugin_config(api.plugin_config)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        api.logger.warning(f"Invalid LlamaFarm plugin config, using defaults ({problems})")
        config = Settings.model_construct()

    api.logger.info(f"LlamaFarm extension registered (server: {config.server_url})")

    service = HealthService(config, transport)
    api.register_service(PluginService(id=HEALTH_SERVICE_ID, start=service.start))

    def on_gateway_start(event: Any = None, ctx: Any = None) -> None:
        api.logger.info(f"LlamaFarm extension active for project {config.namespace}/{config.project}")

    api.on("gateway_start", on_gateway_start)
    api.register_provider(create_provider(config, transport))

    logger.debug("Plugin registered", plugin=PLUGIN_ID, version=PLUGIN_VERSION)
    return config
