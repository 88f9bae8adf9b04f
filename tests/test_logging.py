"""Tests for the cssmodules logger setup."""

from __future__ import annotations

import logging
from pathlib import Path

from cssmodules.logging import configure_logging, get_logger


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger().name == "cssmodules"
    assert get_logger("exports").name == "cssmodules.exports"


def test_configure_logging_replaces_handlers(tmp_path: Path) -> None:
    first = tmp_path / "first.log"
    logger = configure_logging(verbose=True, log_file=first)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logger = configure_logging()
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert not any(isinstance(handler, logging.FileHandler) for handler in logger.handlers)


def test_file_sink_uses_detailed_format(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "run.log"
    configure_logging(log_file=log_file)
    get_logger("url").info("normalized %d values", 3)
    configure_logging()

    line = log_file.read_text(encoding="utf-8").strip()
    assert line.endswith("INFO cssmodules.url: normalized 3 values")
