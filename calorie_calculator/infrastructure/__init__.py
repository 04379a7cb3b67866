"""Infrastructure: environment configuration and logging."""

from .config import (
    get_default_activity_level,
    get_default_unit_system,
    get_log_format,
    get_log_level,
    load_environment,
)
from .logging_config import configure_logging

__all__ = [
    "load_environment",
    "get_log_level",
    "get_log_format",
    "get_default_unit_system",
    "get_default_activity_level",
    "configure_logging",
]
