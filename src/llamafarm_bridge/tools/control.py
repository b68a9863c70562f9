"""Mock control tool."""

from datetime import datetime, timezone
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

from llamafarm_bridge.schemas.tools import ToolResult
from llamafarm_bridge.tools.base import BaseTool

logger = structlog.get_logger(__name__)


class ControlParams(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    action: str = Field(..., description="The action to perform (e.g., 'start', 'stop', 'restart')")
    target: str = Field(..., description="The target to control (e.g., 'service', 'device')")
    options: dict[str, Any] = Field(default_factory=dict, description="Optional action parameters")


class ControlTool(BaseTool):
    """Execute a control action on a target (mock: logs it)."""

    name = "llamafarm-control"
    description = "Execute a control action on a target. This is a mock implementation for testing."
    parameters = ControlParams

    def run(self, call_id: str, args: ControlParams) -> ToolResult:
        logger.info("Mock control", action=args.action, target=args.target, options=args.options)
        return ToolResult.success(
            {
                "success": True,
                "action": args.action,
                "target": args.target,
                "status": "completed",
                "options": args.options,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )
