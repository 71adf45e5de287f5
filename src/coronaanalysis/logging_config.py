"""
Logging Configuration
Routes the calculator's records (rejected table edits, clamped sweeps,
selection fallbacks) to the console.

The level comes from the caller, else from the CORONA_LOG_LEVEL environment
variable, else INFO. Names ("debug", "WARNING") and numbers are accepted.
"""
import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAMESPACE = "coronaanalysis"
LOG_LEVEL_ENV = "CORONA_LOG_LEVEL"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'

# Marks the handler installed here so a second call replaces only that one
_HANDLER_NAME = "coronaanalysis-console"


def resolve_level(level: Union[int, str, None] = None) -> int:
    """Turn a level name, number or None (environment / INFO) into a logging level."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "").strip() or logging.INFO
    if isinstance(level, int):
        return level

    text = level.strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'.")
    return resolved


def setup_logging(level: Union[int, str, None] = None) -> logging.Logger:
    """
    Configures the logger of the 'coronaanalysis' namespace and returns it.

    Calling it again changes the level without stacking console handlers.
    """
    resolved = resolve_level(level)
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(resolved)

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(resolved)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(console_handler)

    logger.debug(f"Logging initialized at {logging.getLevelName(resolved)}.")
    return logger
