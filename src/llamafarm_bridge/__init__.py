"""LlamaFarm bridge: local LLM backend for Moltbot via a LlamaFarm server."""

from llamafarm_bridge.chat import build_chat_request, chat_with_defaults
from llamafarm_bridge.client import LlamaFarmClient, TransportError
from llamafarm_bridge.endpoints import build_chat_endpoint
from llamafarm_bridge.plugin import PLUGIN_ID, PLUGIN_NAME, PLUGIN_VERSION, register
from llamafarm_bridge.provider import create_provider
from llamafarm_bridge.reconciler import ProjectReconciler
from llamafarm_bridge.workspace import WorkspaceMaterializer

__version__ = PLUGIN_VERSION

__all__ = [
    "PLUGIN_ID",
    "PLUGIN_NAME",
    "PLUGIN_VERSION",
    "register",
    "LlamaFarmClient",
    "TransportError",
    "ProjectReconciler",
    "WorkspaceMaterializer",
    "build_chat_request",
    "build_chat_endpoint",
    "chat_with_defaults",
    "create_provider",
]
