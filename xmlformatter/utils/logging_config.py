#!/usr/bin/env python3
"""
Logging configuration for the application.
Provides file + console logging with configurable levels.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from ..config import LOG_FILE, LOG_FORMAT, LOG_DATE_FORMAT, LOG_LEVEL, LOGGER_NAME


def setup_logging(debug: bool = False, log_file: Optional[Path] = LOG_FILE) -> logging.Logger:
    """
    Configure logging for the application.

    Console output goes to stderr so formatted XML on stdout stays clean.

    Args:
        debug: If True, sets console level to DEBUG.
        log_file: File to append to; None disables the file handler.

    Returns:
        The root application logger.
    """
    level = logging.DEBUG if debug else LOG_LEVEL
    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)  # Capture everything; handlers filter

    # Remove existing handlers to avoid duplicates on re-init
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    root_logger.addHandler(console)

    if log_file is not None:
        try:
            file_handler = logging.FileHandler(str(log_file), mode='a', encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError:
            root_logger.warning("Could not create log file at %s", log_file)

    return root_logger
