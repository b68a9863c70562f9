"""Base class for agent tools."""

from abc import ABC, abstractmethod
from typing import Any, Optional

import structlog
from pydantic import BaseModel, ValidationError

from llamafarm_bridge.schemas.tools import ToolResult

logger = structlog.get_logger(__name__)


class BaseTool(ABC):
    """
    Abstract base class for all agent tools.

    Subclasses must implement:
    - name: unique tool name as seen by the model
    - description: one-line description passed to the model
    - parameters: pydantic model describing the arguments
    - run(): the side-effecting part, called only with validated arguments
    """

    name: str = "base"
    description: str = ""
    parameters: type[BaseModel]

    @property
    def required_fields(self) -> list[str]:
        return [name for name, info in self.parameters.model_fields.items() if info.is_required()]

    def json_schema(self) -> dict[str, Any]:
        """JSON schema of the tool parameters."""
        return self.parameters.model_json_schema()

    def function_schema(self) -> dict[str, Any]:
        """Tool description in OpenAI function-calling format."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.json_schema(),
            },
        }

    def execute(self, call_id: str, params: Optional[dict[str, Any]] = None) -> ToolResult:
        """
        Validate arguments and run the tool.

        Validation failures come back as error-flagged results; run() is not
        called for them.
        """
        params = params or {}

        for field in self.required_fields:
            value = params.get(field)
            if value is None or not str(value).strip():
                return ToolResult.error(f"{field} is required")

        try:
            args = self.parameters.model_validate(params)
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            return ToolResult.error(f"{location}: {first['msg']}")

        logger.debug("Executing tool", tool=self.name, call_id=call_id)
        return self.run(call_id, args)

    @abstractmethod
    def run(self, call_id: str, args: BaseModel) -> ToolResult:
        """
        Perform the tool action.

        Args:
            call_id: Identifier of the tool call
            args: Validated parameters

        Returns:
            ToolResult describing the outcome
        """
        pass
