"""Registry of named agent tools."""

import json
from typing import Any, Iterable, Optional

from llamafarm_bridge.tools.base import BaseTool


class ToolRegistry:
    """Named tools behind a uniform interface, in registration order."""

    def __init__(self, tools: Optional[Iterable[BaseTool]] = None):
        self._tools: dict[str, BaseTool] = {}
        for tool in tools or []:
            self.register(tool)

    def register(self, tool: BaseTool) -> None:
        """
        Add a tool.

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool already registered: {tool.name}")
        self._tools[tool.name] = tool

    def get(self, name: str) -> BaseTool:
        try:
            return self._tools[name]
        except KeyError:
            raise KeyError(f"Unknown tool: {name}") from None

    def names(self) -> list[str]:
        return list(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def schemas(self) -> list[dict[str, Any]]:
        """All tools in OpenAI function-calling format."""
        return [tool.function_schema() for tool in self._tools.values()]

    def serialize_for_context(self) -> str:
        """Tool schemas as a JSON string, for the tools_context prompt variable."""
        return json.dumps(self.schemas(), indent=2)
