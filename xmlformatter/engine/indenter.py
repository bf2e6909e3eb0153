#!/usr/bin/env python3
"""
Indentation engine.

Assigns a nesting depth to every line produced by the tokenizer using local
bracket/slash patterns only; tag names are never matched against each other.
Each line is classified, in priority order, as:

1. LEAF  - text followed by a closing tag at the end of the line
           (``<b>1</b>``, ``<b></b>``). Depth unchanged.
2. CLOSE - the line starts with an end tag and the depth is positive.
           The depth drops by one *before* the line is emitted.
3. OPEN  - the line starts with a start tag that is not self-closing.
           The depth rises by one *after* the line is emitted.
4. OTHER - self-closing tags, text, comments, processing instructions,
           and surplus end tags at depth 0. Depth unchanged.
"""

import re
from typing import Iterable, Iterator, List, Sequence, Tuple

from ..models import LineKind

LEAF_LINE = re.compile(r".+</\w[^>]*>$")
CLOSE_LINE = re.compile(r"</\w")
OPEN_LINE = re.compile(r"<\w[^>]*(?<!/)>.*$")


def classify_line(line: str, pad: int) -> LineKind:
    """
    Classify one (already stripped) line given the current depth.

    Args:
        line: Line text without surrounding whitespace
        pad: Depth before this line is emitted

    Returns:
        The LineKind deciding how the depth changes.
    """
    if LEAF_LINE.search(line):
        return LineKind.LEAF
    if CLOSE_LINE.match(line) and pad > 0:
        return LineKind.CLOSE
    if OPEN_LINE.match(line):
        return LineKind.OPEN
    return LineKind.OTHER


def _step(pad: int, line: str) -> Tuple[int, int]:
    """Return (depth to emit the line at, depth for the next line)."""
    kind = classify_line(line, pad)
    if kind is LineKind.CLOSE:
        return pad - 1, pad - 1
    if kind is LineKind.OPEN:
        return pad, pad + 1
    return pad, pad


def iter_depths(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """
    Walk the lines and yield (depth, stripped line) pairs.

    The depth is threaded through the walk as a local accumulator starting at
    zero; it never goes below zero.
    """
    pad = 0
    for raw in lines:
        line = raw.strip()
        depth, pad = _step(pad, line)
        yield depth, line


def check_unit_width(unit_width: int) -> None:
    """Raise ValueError unless unit_width is a non-negative integer."""
    if isinstance(unit_width, bool) or not isinstance(unit_width, int):
        raise ValueError(f"Indent width must be an integer, got {unit_width!r}")
    if unit_width < 0:
        raise ValueError(f"Indent width must be non-negative, got {unit_width}")


def indent(lines: Sequence[str], unit_width: int) -> str:
    """
    Re-indent a line sequence.

    Args:
        lines: Tokenizer output, in document order
        unit_width: Spaces per nesting level (any non-negative integer)

    Returns:
        The joined, indented text with leading/trailing whitespace trimmed.

    Raises:
        ValueError: If unit_width is negative or not an integer.
    """
    check_unit_width(unit_width)
    out: List[str] = []
    for depth, line in iter_depths(lines):
        out.append(" " * (unit_width * depth) + line + "\n")
    return "".join(out).strip()
