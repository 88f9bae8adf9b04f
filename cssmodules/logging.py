"""Logger hierarchy for cssmodules.

Library modules log through ``get_logger("<area>")`` and never
install handlers themselves; the CLI calls :func:`configure_logging` once per
invocation.
"""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "cssmodules"

CONSOLE_FORMAT = "[cssmodules] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``cssmodules.<name>``, or the root cssmodules logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def _detach_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _attach(logger: logging.Logger, handler: logging.Handler, fmt: str, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send cssmodules records to stderr and, when ``log_file`` is set, to that file.

    Calling this again replaces (and closes) the handlers from the previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False
    _detach_handlers(logger)

    _attach(logger, logging.StreamHandler(), CONSOLE_FORMAT, level)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), FILE_FORMAT, level)
    return logger


__all__ = ["configure_logging", "get_logger"]
