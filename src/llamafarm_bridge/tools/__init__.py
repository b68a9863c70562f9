"""Agent tools exposed through the LlamaFarm provider."""

from llamafarm_bridge.tools.base import BaseTool
from llamafarm_bridge.tools.control import ControlTool
from llamafarm_bridge.tools.move import MoveTool
from llamafarm_bridge.tools.notify import NotifyTool
from llamafarm_bridge.tools.registry import ToolRegistry


def default_registry() -> ToolRegistry:
    """Registry holding the mock tools."""
    return ToolRegistry([NotifyTool(), ControlTool(), MoveTool()])


__all__ = [
    "BaseTool",
    "NotifyTool",
    "ControlTool",
    "MoveTool",
    "ToolRegistry",
    "default_registry",
]
