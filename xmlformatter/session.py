#!/usr/bin/env python3
"""
Formatter session - the state behind the formatter window.

Holds the input/output text, the chosen indent width and the last error,
and turns every user action into a Notification. Blank input is rejected
here, before the engine is called.
"""

import logging
from typing import Callable, Optional

from .config import DEFAULT_INDENT, MESSAGES
from .models import FormatError, ErrorKind, Notification, Operation
from .engine import run_operation
from .engine.indenter import check_unit_width
from .utils.file_utils import write_file_safe

logger = logging.getLogger(__name__)


def is_blank(text: Optional[str]) -> bool:
    """True for None, empty or whitespace-only text."""
    return not text or not text.strip()


class FormatterSession:
    """State and actions of one formatter view."""

    def __init__(self, indent_width: int = DEFAULT_INDENT):
        check_unit_width(indent_width)
        self.input_text = ""
        self.output_text = ""
        self.indent_width = indent_width
        self.error: Optional[FormatError] = None

    def set_indent_width(self, width: int) -> None:
        check_unit_width(width)
        self.indent_width = width

    # ─── Engine actions ────────────────────────────────────

    def _run(self, operation: Operation, success_key: str) -> Notification:
        self.error = None
        if is_blank(self.input_text):
            return Notification("error", MESSAGES["blank_input"])

        result = run_operation(operation, self.input_text, self.indent_width)
        if not result.is_success:
            self.error = result.error
            logger.info("%s rejected: %s", operation, result.error.detail or result.error.message)
            return Notification("error", result.error.message)

        if result.output is not None:
            self.output_text = result.output
        return Notification("success", MESSAGES[success_key])

    def validate(self) -> Notification:
        return self._run(Operation.VALIDATE, "valid")

    def format(self) -> Notification:
        return self._run(Operation.FORMAT, "formatted")

    def minify(self) -> Notification:
        return self._run(Operation.MINIFY, "minified")

    # ─── Output actions ────────────────────────────────────

    def copy_output(self, clipboard: Callable[[str], None]) -> Notification:
        """Hand the output to a clipboard writer."""
        self.error = None
        if not self.output_text:
            return Notification("error", MESSAGES["nothing_to_copy"])
        clipboard(self.output_text)
        return Notification("success", MESSAGES["copied"])

    def export_output(self, path: str) -> Notification:
        """Write the output to a file."""
        self.error = None
        if not self.output_text:
            return Notification("error", MESSAGES["nothing_to_save"])
        ok, err = write_file_safe(path, self.output_text)
        if not ok:
            self.error = FormatError(kind=ErrorKind.IO_ERROR, message=err)
            return Notification("error", MESSAGES["save_failed"].format(reason=err))
        logger.info("Output saved to %s", path)
        return Notification("success", MESSAGES["saved"].format(path=path))

    def clear(self) -> Notification:
        self.input_text = ""
        self.output_text = ""
        self.error = None
        return Notification("success", MESSAGES["cleared"])
