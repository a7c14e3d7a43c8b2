"""
Logging configuration.

The terminal belongs to the board while the sandbox runs (raw mode, alternate screen), so log records
can only go to a file. Without a log file, logging is silenced.
"""

import logging

from src.core.config import Settings

ROOT_LOGGER = "src"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logger(settings: Settings) -> logging.Logger:
    """
    Configure the package logger according to the settings.

    Returns:
        The configured (package level) logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(settings.log_level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = False

    if settings.log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(settings.log_file, mode="w", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger
