"""Logging configuration.

Routes structlog through the standard library so third-party log
records and our own share one level filter and one output stream.
"""

import logging
import sys

import structlog

from tendzd.infrastructure import config
from tendzd.infrastructure.config import Settings


def configure_logging(level: str = "INFO", json: bool = True) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level name, e.g. ``"INFO"``.
        json: Render JSON lines; otherwise a human-readable console format.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )
    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging(settings: Settings | None = None) -> None:
    """Configure logging from application settings.

    Call once at process startup.

    Args:
        settings: Settings to read ``log_level`` and ``log_json`` from;
            defaults to the environment.
    """
    settings = settings or config.settings
    configure_logging(settings.log_level, json=settings.log_json)
