#!/usr/bin/env python3
"""
Well-formedness checker.
Runs the document through Python's xml.sax (expat) purely for its error
signal; no tree is built and no event is kept.
"""

import io
import logging
import xml.sax
from xml.sax.handler import ContentHandler, feature_external_ges, feature_external_pes
from xml.sax.xmlreader import InputSource
from typing import Optional

from ..models import FormatError, ErrorKind
from ..config import MESSAGES

logger = logging.getLogger(__name__)


def _make_parser():
    parser = xml.sax.make_parser()
    parser.setContentHandler(ContentHandler())
    # Never fetch external entities while checking untrusted input
    parser.setFeature(feature_external_ges, False)
    parser.setFeature(feature_external_pes, False)
    return parser


def check_well_formed(document: str) -> Optional[FormatError]:
    """
    Parse a document and report the first well-formedness error.

    Args:
        document: Raw XML text (any string, including empty)

    Returns:
        None if the document is well-formed, otherwise a FormatError whose
        detail holds the parser diagnostic.
    """
    source = InputSource()
    source.setCharacterStream(io.StringIO(document))

    try:
        _make_parser().parse(source)
    except xml.sax.SAXParseException as e:
        logger.debug("Not well-formed at %s:%s: %s",
                     e.getLineNumber(), e.getColumnNumber(), e.getMessage())
        return FormatError(
            kind=ErrorKind.NOT_WELL_FORMED,
            message=MESSAGES["not_well_formed"],
            line=e.getLineNumber(),
            col=e.getColumnNumber(),
            detail=e.getMessage(),
        )
    except (xml.sax.SAXException, ValueError) as e:
        # Lone surrogates and similar text that cannot reach the parser
        logger.debug("Not well-formed: %s", e)
        return FormatError(
            kind=ErrorKind.NOT_WELL_FORMED,
            message=MESSAGES["not_well_formed"],
            detail=str(e),
        )
    return None


def is_well_formed(document: str) -> bool:
    """Return True if the string parses as a single XML document."""
    return check_well_formed(document) is None
