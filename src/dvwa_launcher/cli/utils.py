#!/usr/bin/env python3
"""
Utility functions for dvwa-launcher CLI

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

import logging
import os
import sys
from typing import Optional

from rich.console import Console
from rich.errors import MarkupError
from rich.logging import RichHandler
from rich.text import Text

from dvwa_launcher.core.console import OUTPUT_LOGGER_NAME
from dvwa_launcher.core.errors import ErrorHandler, set_error_handler
from .constants import LOG_FILE_NAME


# Initialize Rich console
console = Console()

LOG_FORMAT = "[%(asctime)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class PlainFormatter(logging.Formatter):
    """Formatter that strips Rich markup from messages."""

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        try:
            return Text.from_markup(formatted).plain
        except MarkupError:
            # not valid markup, keep the text as written
            return formatted


class ConsoleFilter(logging.Filter):
    """Drop records flagged with extra={"console": False}."""

    def filter(self, record: logging.LogRecord) -> bool:
        return getattr(record, "console", True)


def default_log_file() -> str:
    """Log file path next to the invoked script.

    Falls back to the working directory when the script directory is
    missing or not writable, e.g. a system-wide bin directory.
    """
    script_dir = os.path.dirname(os.path.abspath(sys.argv[0]))
    if not os.access(script_dir, os.W_OK):
        script_dir = os.getcwd()
    return os.path.join(script_dir, LOG_FILE_NAME)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Setup Rich logging, the append-only run log and the error handler.

    Messages go to the terminal through Rich and to the log file as
    ``[YYYY-MM-DD HH:MM:SS] message`` lines. Command output is appended
    to the same file as-is.
    """
    log_level = logging.DEBUG if verbose else logging.INFO

    # Setup rich logging handler
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=verbose,
        markup=True,
        rich_tracebacks=True,
    )
    rich_handler.addFilter(ConsoleFilter())
    handlers = [rich_handler]

    output_logger = logging.getLogger(OUTPUT_LOGGER_NAME)
    output_logger.propagate = False
    output_logger.setLevel(logging.INFO)
    for handler in list(output_logger.handlers):
        output_logger.removeHandler(handler)
        handler.close()

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(PlainFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        handlers.append(file_handler)

        output_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        output_handler.setFormatter(logging.Formatter("%(message)s"))
        output_logger.addHandler(output_handler)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )

    # Setup unified error handler
    error_handler = ErrorHandler(console=console, verbose=verbose)
    set_error_handler(error_handler)
