"""
Configuration & Global Constants
================================
Central registry for the constants shared across the model.

Exports:
    DEFAULT_BOOSTER_COUNT (int): Instances in a freshly created booster set.
    COORDINATE_TOLERANCE (float): Absolute tolerance for coordinate comparison.
    LOG_LEVEL (int): Level used by `setup_logging` when none is given.
"""
import logging
import os

DEFAULT_BOOSTER_COUNT: int = 2
COORDINATE_TOLERANCE: float = 1e-9

# Debug tree column widths
LABEL_WIDTH: int = 24
COORDINATE_WIDTH: int = 32


def get_log_level(default: str = "INFO") -> int:
    """
    Read the log level from ROCKETLAYOUT_LOG_LEVEL.
    Unknown names fall back to the default.
    """
    name = os.environ.get("ROCKETLAYOUT_LOG_LEVEL", default).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.getLevelName(default.upper())
    return level


LOG_LEVEL: int = get_log_level()
