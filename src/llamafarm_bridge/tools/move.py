"""Mock movement/navigation tool."""

import random
from datetime import datetime, timezone
from typing import Literal, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field

from llamafarm_bridge.schemas.tools import ToolResult
from llamafarm_bridge.tools.base import BaseTool

logger = structlog.get_logger(__name__)


class MoveParams(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    destination: str = Field(..., description="The destination to move to")
    speed: Literal["slow", "normal", "fast"] = Field(
        default="normal", description="Movement speed (slow, normal, fast). Default: normal"
    )
    path: Optional[str] = Field(default=None, description="Optional specific path to follow")


class MoveTool(BaseTool):
    """Move to a destination (mock: logs it and reports a made-up distance)."""

    name = "llamafarm-move"
    description = "Navigate or move to a destination. This is a mock implementation for testing."
    parameters = MoveParams

    def run(self, call_id: str, args: MoveParams) -> ToolResult:
        logger.info("Mock move", destination=args.destination, speed=args.speed, path=args.path)
        return ToolResult.success(
            {
                "success": True,
                "destination": args.destination,
                "speed": args.speed,
                "path": args.path or None,
                "status": "arrived",
                "distance": random.randint(1, 100),
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )
