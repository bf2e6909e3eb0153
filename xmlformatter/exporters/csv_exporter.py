#!/usr/bin/env python3
"""
CSV report exporter.
"""

import csv
import logging
from typing import List

from ..models import FormatResult

logger = logging.getLogger(__name__)


def export_csv(results: List[FormatResult], output_path: str) -> bool:
    """
    Export operation results as a CSV file, one row per input.

    Args:
        results: List of FormatResult objects
        output_path: Output CSV file path

    Returns:
        True on success
    """
    try:
        with open(output_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(["Source", "Operation", "Status", "Error", "Line", "Col", "Detail", "Duration (ms)"])

            for r in results:
                e = r.error
                writer.writerow([
                    r.source or "",
                    str(r.operation),
                    r.status,
                    str(e.kind) if e else "",
                    (e.line or "") if e else "",
                    (e.col if e.col is not None else "") if e else "",
                    (e.detail or e.message) if e else "",
                    r.duration_ms,
                ])

        logger.info("CSV report exported to %s", output_path)
        return True

    except OSError as e:
        logger.error("Failed to export CSV report: %s", e)
        return False
