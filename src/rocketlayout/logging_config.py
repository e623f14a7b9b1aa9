"""
Logging Configuration
=====================
Handlers for the 'rocketlayout' logger namespace.

Console output goes to stderr: the debug tree printed by the entry point
owns stdout, so the two can be redirected separately.
"""
import logging
import sys
from typing import Optional

from rocketlayout.config import LOG_LEVEL

PACKAGE_LOGGER = "rocketlayout"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = LOG_LEVEL, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger and return it.

    Args:
        level: Logging level; defaults to ROCKETLAYOUT_LOG_LEVEL.
        log_file: Optional path that receives a full copy of the log.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Re-running setup replaces handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging to stderr at {logging.getLevelName(level)}"
                 + (f" and to '{log_file}'." if log_file else "."))
    return logger
