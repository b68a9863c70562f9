"""Mock notification tool."""

from datetime import datetime, timezone
from typing import Literal, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field

from llamafarm_bridge.schemas.tools import ToolResult
from llamafarm_bridge.tools.base import BaseTool

logger = structlog.get_logger(__name__)


class NotifyParams(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    message: str = Field(..., description="The notification message to send")
    level: Literal["info", "warn", "error"] = Field(
        default="info", description="Notification level (info, warn, error). Default: info"
    )
    title: Optional[str] = Field(default=None, description="Optional notification title")


class NotifyTool(BaseTool):
    """Send a notification (mock: logs it)."""

    name = "llamafarm-notify"
    description = "Send a notification message. This is a mock implementation for testing."
    parameters = NotifyParams

    def run(self, call_id: str, args: NotifyParams) -> ToolResult:
        logger.info("Mock notify", level=args.level, title=args.title, message=args.message)
        return ToolResult.success(
            {
                "success": True,
                "notified": True,
                "level": args.level,
                "message": args.message,
                "title": args.title or None,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )
