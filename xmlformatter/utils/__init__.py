"""
Utilities package - File I/O, logging setup, syntax highlighting.
"""

from .file_utils import read_file_safe, write_file_safe, find_xml_files
from .logging_config import setup_logging
