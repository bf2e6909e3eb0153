#!/usr/bin/env python3
"""
Tag-boundary tokenizer.
Splits raw XML into lines by breaking wherever one tag's closing bracket
touches the next tag's opening bracket.
"""

import re
from typing import List

# '>' immediately followed by '<' (and any slashes of an end tag)
TAG_BOUNDARY = re.compile(r"(>)(<)(/*)")

_START_TAG = re.compile(r"<([A-Za-z_][\w:.-]*)(?:\s[^<>]*)?(?<!/)")
_END_TAG_NAME = re.compile(r"([A-Za-z_][\w:.-]*)\s*>")


def _is_empty_element(text: str, boundary: re.Match) -> bool:
    """True if the boundary sits between a start tag and its own end tag."""
    if boundary.group(3) != "/":
        return False
    gt = boundary.start(1)
    lt = text.rfind("<", 0, gt)
    if lt < 0:
        return False
    start = _START_TAG.fullmatch(text, lt, gt)
    if not start:
        return False
    end = _END_TAG_NAME.match(text, boundary.end())
    return bool(end) and end.group(1) == start.group(1)


def break_tag_boundaries(document: str) -> str:
    """
    Insert a newline between every adjacent '>' and '<'.

    An empty element written as a start tag directly followed by its end tag
    (e.g. ``<b></b>``) is left on one line.
    """
    def _replace(match: re.Match) -> str:
        if _is_empty_element(match.string, match):
            return match.group(0)
        return f"{match.group(1)}\n{match.group(2)}{match.group(3)}"

    return TAG_BOUNDARY.sub(_replace, document)


def split_into_lines(document: str) -> List[str]:
    """
    Split a document into one line per tag or text run.

    Args:
        document: Raw XML text

    Returns:
        Lines in document order; pre-existing newlines are split on as well.
    """
    return break_tag_boundaries(document).split("\n")
