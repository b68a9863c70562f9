"""Console + file logging for the bridge using structlog."""

import logging
import sys
from datetime import datetime
from typing import Optional

import structlog

from llamafarm_bridge.config import Settings, get_settings


def setup_logging(config: Optional[Settings] = None) -> structlog.stdlib.BoundLogger:
    """
    Configure structlog over stdlib logging.

    The console always gets colored plain text. File output follows
    config.log_format: "json", "text", or "both".
    """
    config = config or get_settings()

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
            foreign_pre_chain=shared_processors,
        )
    )
    root_logger.addHandler(console_handler)

    if config.log_format in ("json", "both"):
        json_log_dir = config.log_dir / "json"
        json_log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = logging.FileHandler(json_log_dir / f"llamafarm_bridge_{timestamp}.json", encoding="utf-8")
        json_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=shared_processors,
            )
        )
        root_logger.addHandler(json_handler)

    if config.log_format in ("text", "both"):
        text_log_dir = config.log_dir / "text"
        text_log_dir.mkdir(parents=True, exist_ok=True)
        text_handler = logging.FileHandler(text_log_dir / f"llamafarm_bridge_{timestamp}.log", encoding="utf-8")
        text_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.dev.ConsoleRenderer(colors=False),
                foreign_pre_chain=shared_processors,
            )
        )
        root_logger.addHandler(text_handler)

    return structlog.get_logger()
