from __future__ import annotations

import logging
from pathlib import Path

import config
from logging_config import resolve_level, setup_logging


def test_resolve_level() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.WARNING) == logging.WARNING
    assert resolve_level(None) == logging.INFO
    assert resolve_level("LOUD") == logging.INFO


def test_setup_does_not_stack_handlers() -> None:
    setup_logging("INFO")
    logger = setup_logging("INFO")

    assert logger.name == config.LOGGER_NAME
    assert len(logger.handlers) == 1


def test_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "app.log"
    logger = setup_logging("INFO", log_file=str(log_file))

    logging.getLogger(f"{config.LOGGER_NAME}.controller").info("hello file")
    for handler in logger.handlers:
        handler.flush()

    assert "hello file" in log_file.read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
