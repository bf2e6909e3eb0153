#!/usr/bin/env python3
"""
XML syntax highlighting backed by pygments.
Provides ANSI output for the terminal and tagged spans for the GUI editor.
"""

from typing import Iterator, Tuple

from pygments import highlight, lex
from pygments.formatters import TerminalFormatter
from pygments.lexers import XmlLexer
from pygments.token import Token

# GUI text-tag names keyed by the pygments token family they cover.
TOKEN_TAGS = (
    (Token.Comment, "comment"),
    (Token.Name.Tag, "tag"),
    (Token.Name.Attribute, "attr_name"),
    (Token.Literal.String, "attr_value"),
    (Token.Name.Entity, "entity"),
)


def highlight_terminal(text: str) -> str:
    """Return text with ANSI colour codes for an XML document."""
    return highlight(text, XmlLexer(), TerminalFormatter())


def tag_for_token(token_type) -> str:
    """Map a pygments token type to a GUI tag name ('' for plain text)."""
    for family, tag in TOKEN_TAGS:
        if token_type in family:
            return tag
    return ""


def iter_tagged_spans(text: str) -> Iterator[Tuple[str, str]]:
    """
    Split text into (tag, chunk) pairs in document order.

    Concatenating the chunks gives back the input, except that pygments
    guarantees a trailing newline.
    """
    for token_type, value in lex(text, XmlLexer()):
        if value:
            yield tag_for_token(token_type), value
