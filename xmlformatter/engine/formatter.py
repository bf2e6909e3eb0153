#!/usr/bin/env python3
"""
Formatter façade.
Exposes the three user operations (validate, format, minify). Failures are
returned inside a FormatResult, never raised.
"""

import time
import logging
from typing import Optional

from ..models import FormatResult, Operation
from ..config import DEFAULT_INDENT
from .wellformed import check_well_formed
from .tokenizer import split_into_lines
from .indenter import indent, check_unit_width
from .minifier import minify

logger = logging.getLogger(__name__)


def _finish(result: FormatResult, start_time: float) -> FormatResult:
    result.duration_ms = round((time.time() - start_time) * 1000, 2)
    if result.is_success:
        logger.debug("%s ok in %.2fms", result.operation, result.duration_ms)
    else:
        logger.debug("%s failed: %s", result.operation, result.error.detail or result.error.message)
    return result


def validate(document: str, source: Optional[str] = None) -> FormatResult:
    """
    Check that a document is well-formed.

    Args:
        document: Raw XML text; callers reject blank input beforehand
        source: Optional origin (file path) recorded on the result

    Returns:
        A successful result without output, or a NOT_WELL_FORMED failure.
    """
    start_time = time.time()
    error = check_well_formed(document)
    return _finish(FormatResult(operation=Operation.VALIDATE, error=error, source=source),
                   start_time)


def format_document(document: str, indent_width: int = DEFAULT_INDENT,
                    source: Optional[str] = None) -> FormatResult:
    """
    Pretty-print a well-formed document.

    Args:
        document: Raw XML text
        indent_width: Spaces per nesting level
        source: Optional origin recorded on the result

    Returns:
        A result carrying the indented text, or a NOT_WELL_FORMED failure
        with no output.

    Raises:
        ValueError: If indent_width is negative or not an integer.
    """
    check_unit_width(indent_width)
    start_time = time.time()
    result = FormatResult(operation=Operation.FORMAT, source=source, indent_width=indent_width)
    result.error = check_well_formed(document)
    if result.error is None:
        result.output = indent(split_into_lines(document), indent_width)
    return _finish(result, start_time)


def minify_document(document: str, source: Optional[str] = None) -> FormatResult:
    """Minify a well-formed document; fails exactly like format_document."""
    start_time = time.time()
    result = FormatResult(operation=Operation.MINIFY, source=source)
    result.error = check_well_formed(document)
    if result.error is None:
        result.output = minify(document)
    return _finish(result, start_time)


def run_operation(operation: Operation, document: str,
                  indent_width: int = DEFAULT_INDENT,
                  source: Optional[str] = None) -> FormatResult:
    """Dispatch to validate, format_document or minify_document."""
    if operation is Operation.VALIDATE:
        return validate(document, source=source)
    if operation is Operation.FORMAT:
        return format_document(document, indent_width, source=source)
    if operation is Operation.MINIFY:
        return minify_document(document, source=source)
    raise ValueError(f"Unknown operation: {operation!r}")
