#!/usr/bin/env python3
"""
Safe file I/O utilities with encoding detection and error handling.
"""

import os
import shutil
import logging
from typing import List, Optional, Tuple
from pathlib import Path

from ..config import ENCODING_FALLBACKS, MAX_FILE_SIZE_MB, SUPPORTED_EXTENSIONS

logger = logging.getLogger(__name__)


def read_file_safe(path: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Read a file with encoding fallback.

    Tries multiple encodings and returns the content and detected encoding.

    Args:
        path: File path to read

    Returns:
        (content, encoding) or (None, error_message) on failure
    """
    if not os.path.isfile(path):
        return None, f"File not found: {path}"

    file_size_mb = os.path.getsize(path) / (1024 * 1024)
    if file_size_mb > MAX_FILE_SIZE_MB:
        return None, f"File too large ({file_size_mb:.1f} MB > {MAX_FILE_SIZE_MB} MB limit)"

    for enc in ENCODING_FALLBACKS:
        try:
            with open(path, encoding=enc) as f:
                content = f.read()
            return content, enc
        except (UnicodeDecodeError, UnicodeError):
            continue
        except PermissionError:
            return None, f"Permission denied: {path}"
        except OSError as e:
            return None, f"Read error: {e}"

    return None, "Cannot decode file with any supported encoding"


def write_file_safe(path: str, content: str, create_backup: bool = False) -> Tuple[bool, Optional[str]]:
    """
    Write text to a file as UTF-8.

    Args:
        path: Destination path
        content: Text to write
        create_backup: Copy an existing file to ``<path>.bak`` first

    Returns:
        (success, error_message)
    """
    if create_backup and os.path.isfile(path):
        try:
            shutil.copy2(path, path + ".bak")
        except OSError as e:
            logger.warning("Failed to create backup for %s: %s", path, e)

    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return True, None
    except OSError as e:
        logger.error("Cannot write %s: %s", path, e)
        return False, f"Cannot write file: {e}"


def find_xml_files(folder: str) -> List[str]:
    """
    Recursively find all XML files in a folder.

    Args:
        folder: Root folder to search

    Returns:
        Sorted list of XML file paths
    """
    xml_files = []
    try:
        for root, _, files in os.walk(folder):
            for f in files:
                if Path(f).suffix.lower() in SUPPORTED_EXTENSIONS:
                    xml_files.append(os.path.join(root, f))
    except OSError as e:
        logger.error("Error scanning folder %s: %s", folder, e)
    return sorted(xml_files)
