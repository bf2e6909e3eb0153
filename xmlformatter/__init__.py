"""
XML Formatter Pro - validate, pretty-print and minify XML documents.
"""

from .config import APP_VERSION as __version__
from .engine import validate, format_document, minify_document, is_well_formed
