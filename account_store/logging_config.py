"""structlog setup shared by scripts and host applications."""

import logging
from typing import Optional

import structlog

from account_store.config import get_log_level


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog with ISO timestamps and a console renderer.

    Args:
        level: Level name (defaults to LOG_LEVEL env var)
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
    )
