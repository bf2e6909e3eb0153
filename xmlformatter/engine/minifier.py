#!/usr/bin/env python3
"""
XML minifier.
Collapses whitespace without parsing; callers validate first if they need to.
"""

import re

INTER_TAG_WHITESPACE = re.compile(r">\s+<")
WHITESPACE_RUN = re.compile(r"\s+")


def minify(document: str) -> str:
    """
    Minify XML text.

    Removes whitespace between '>' and '<', collapses every other whitespace
    run to a single space and trims the ends.
    """
    compact = INTER_TAG_WHITESPACE.sub("><", document)
    compact = WHITESPACE_RUN.sub(" ", compact)
    return compact.strip()
