"""Structured logging setup."""

from typing import Optional

import structlog

from .config import get_log_format, get_log_level


def configure_logging(level: Optional[int] = None, fmt: Optional[str] = None) -> None:
    """Configure structlog for the calculator.

    Args:
        level: Minimum level to emit, defaults to LOG_LEVEL
        fmt: "console" or "json", defaults to LOG_FORMAT
    """
    level = get_log_level() if level is None else level
    fmt = get_log_format() if fmt is None else fmt

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
