"""
Engine package - Well-formedness check, tokenizer, indentation, minifier.
"""

from .wellformed import is_well_formed, check_well_formed
from .tokenizer import split_into_lines
from .indenter import indent, classify_line
from .minifier import minify
from .formatter import validate, format_document, minify_document, run_operation
