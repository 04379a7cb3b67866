"""Configuration utilities for infrastructure layer."""

import logging
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from ..domain.metabolism.core.value_objects.activity_level import ActivityLevel
from ..domain.shared.errors import UnknownKeyError
from ..domain.units.value_objects import UnitSystem

LOG_FORMATS = ("console", "json")


def load_environment(path: Optional[str] = None) -> bool:
    """
    Load variables from a .env file, if present.

    Values already set in the process environment take precedence.

    Args:
        path: Explicit .env path, defaults to the nearest .env from the
            working directory

    Returns:
        True if a file was found and loaded
    """
    path = path or find_dotenv(usecwd=True)
    if not path or not os.path.isfile(path):
        return False
    return load_dotenv(path, override=False)


def get_log_level() -> int:
    """
    Get logging level.

    Returns:
        Numeric level from LOG_LEVEL env var, defaults to INFO
    """
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_log_format() -> str:
    """
    Get log renderer name.

    Returns:
        "console" or "json" from LOG_FORMAT env var, defaults to "console"
    """
    fmt = os.getenv("LOG_FORMAT", "console").strip().lower()
    return fmt if fmt in LOG_FORMATS else "console"


def get_default_unit_system() -> UnitSystem:
    """
    Get unit system preselected on a fresh form.

    Returns:
        UnitSystem from CALCULATOR_DEFAULT_UNIT_SYSTEM, defaults to metric
    """
    raw = os.getenv("CALCULATOR_DEFAULT_UNIT_SYSTEM", UnitSystem.METRIC.value)
    try:
        return UnitSystem.from_key(raw)
    except UnknownKeyError:
        return UnitSystem.METRIC


def get_default_activity_level() -> ActivityLevel:
    """
    Get activity level preselected on a fresh form.

    Returns:
        ActivityLevel from CALCULATOR_DEFAULT_ACTIVITY, defaults to sedentary
    """
    raw = os.getenv("CALCULATOR_DEFAULT_ACTIVITY", ActivityLevel.SEDENTARY.value)
    try:
        return ActivityLevel.from_key(raw)
    except UnknownKeyError:
        return ActivityLevel.SEDENTARY
