"""Tests for mddoc.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from mddoc.logging import PROGRESS, configure_logging, get_logger


def test_progress_sits_between_debug_and_info() -> None:
    assert logging.DEBUG < PROGRESS < logging.INFO
    assert logging.getLevelName(PROGRESS) == "PROGRESS"


def test_quiet_console_hides_progress() -> None:
    logger = configure_logging(verbose=False)
    assert logger.name == "mddoc"
    assert not logger.propagate
    assert len(logger.handlers) == 1
    assert not get_logger("sink").isEnabledFor(PROGRESS)
    assert get_logger("sink").isEnabledFor(logging.INFO)


def test_verbose_console_shows_progress_and_debug() -> None:
    configure_logging(verbose=True)
    assert get_logger("generator").isEnabledFor(PROGRESS)
    assert get_logger("cli").isEnabledFor(logging.DEBUG)


def test_repeated_configuration_does_not_duplicate_handlers() -> None:
    configure_logging()
    logger = configure_logging()
    assert len(logger.handlers) == 1


def test_log_file_records_progress_in_quiet_runs(tmp_path: Path) -> None:
    log_file = tmp_path / "mddoc.log"
    logger = configure_logging(verbose=False, log_file=log_file)
    console = logger.handlers[0]

    get_logger("sink").log(PROGRESS, "  Written: %s", "README.md")
    for handler in logger.handlers:
        handler.flush()

    assert console.level == logging.INFO
    assert "PROGRESS mddoc.sink:   Written: README.md" in log_file.read_text(encoding="utf-8")
