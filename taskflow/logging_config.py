"""
Logging setup for the service and the command line tools.

Modules log through the standard library; structlog renders every record
on a single stderr handler, as JSON lines or as console text.
"""
import logging
import sys
from typing import Optional

import structlog

from taskflow.config import Settings, get_settings
from taskflow.monitoring import add_request_id


def shared_processors() -> list:
    """Processors applied to both stdlib and structlog records before rendering."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        add_request_id,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def build_formatter(log_format: str) -> structlog.stdlib.ProcessorFormatter:
    """
    Build the handler formatter for a log format.

    Args:
        log_format: "json" for one JSON object per line, "text" for console output
    """
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure structlog and standard logging.

    Replaces existing root handlers with a single stderr handler using
    the configured level and format (json or text).
    """
    settings = settings or get_settings()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(build_formatter(settings.log_format))

    logging.basicConfig(
        handlers=[handler],
        level=settings.log_level,
        force=True,
    )

    structlog.configure(
        processors=[
            *shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
