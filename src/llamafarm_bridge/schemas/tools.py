"""Schemas for agent tool results."""

import json
from typing import Any, Literal

from pydantic import BaseModel, Field


class ToolContent(BaseModel):
    """One content block of a tool result."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Structured result returned by a tool's execute()."""

    content: list[ToolContent] = Field(default_factory=list)
    is_error: bool = False

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(content=[ToolContent(text=f"Error: {message}")], is_error=True)

    @classmethod
    def success(cls, payload: dict[str, Any]) -> "ToolResult":
        return cls(content=[ToolContent(text=json.dumps(payload))])

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)

    def payload(self) -> dict[str, Any]:
        """Decode the JSON payload of a success result."""
        return json.loads(self.content[0].text)
