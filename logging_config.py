"""
Logging setup for the house price predictor.

Streamlit re-executes app.py on every interaction, so handlers are reset
each time instead of being stacked.
"""
import logging
import sys

import config


def resolve_level(level):
    """Turn 'DEBUG' / 10 / None into a logging level, falling back to INFO."""
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level=None, log_file=None):
    """
    Configure the package logger.

    Args:
        level: Logging level name or number. Defaults to config.LOG_LEVEL.
        log_file: Optional path to also write logs to.
    """
    level = resolve_level(config.LOG_LEVEL if level is None else level)

    logger = logging.getLogger(config.LOGGER_NAME)
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized at %s", logging.getLevelName(level))
    return logger
