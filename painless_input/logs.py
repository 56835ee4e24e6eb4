"""Logging setup for painless_input.

The prompts draw directly on the terminal, so log output never goes there.
Records are written to a file through rich's RichHandler when a log file
is configured, and dropped otherwise.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

from . import config

PACKAGE_LOGGER = "painless_input"

_file_handler: RichHandler | None = None
_log_stream: TextIO | None = None


def configure_logging(
    level: str | int | None = None,
    log_file: str | Path | None = None,
) -> logging.Logger:
    """Attach a file-backed RichHandler to the package logger.

    Args:
        level: Logging level; defaults to PAINLESS_INPUT_LOG_LEVEL.
        log_file: Destination file; defaults to PAINLESS_INPUT_LOG_FILE.
            With no file configured only a NullHandler is installed.

    Returns:
        The package logger.
    """
    global _file_handler, _log_stream

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level if level is not None else config.LOG_LEVEL)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())

    path = log_file if log_file is not None else config.LOG_FILE
    if not path:
        return logger

    if _file_handler is not None:
        logger.removeHandler(_file_handler)
        _file_handler.close()
    if _log_stream is not None:
        _log_stream.close()

    _log_stream = open(path, "a", encoding="utf-8")
    console = Console(file=_log_stream, force_terminal=False, width=120)
    _file_handler = RichHandler(
        console=console,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    logger.addHandler(_file_handler)
    # Keep records out of the root logger's (terminal) handlers.
    logger.propagate = False
    return logger
