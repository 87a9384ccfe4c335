"""Logging utilities for mddoc runs.

Per-file progress lines are logged at :data:`PROGRESS`, which sits between DEBUG and
INFO: a verbose run shows them, a normal run keeps INFO and above.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "mddoc"

PROGRESS = logging.INFO - 5
logging.addLevelName(PROGRESS, "PROGRESS")


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the mddoc hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route mddoc records to stderr, and to ``log_file`` when given.

    ``verbose`` opens the console to DEBUG, which includes every PROGRESS line and
    failure tracebacks; otherwise only INFO and above reach it. The log file never
    drops PROGRESS lines, so it lists every file the run wrote.
    """
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(console_level)
    stream_handler.setFormatter(logging.Formatter("[mddoc] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    logger_level = console_level
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(min(console_level, PROGRESS))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)
        logger_level = min(console_level, PROGRESS)

    logger.setLevel(logger_level)
    return logger


__all__ = ["PROGRESS", "configure_logging", "get_logger"]
