#!/usr/bin/env python3
"""
JSON report exporter.
"""

import json
import logging
from datetime import datetime
from typing import List

from ..models import FormatResult
from ..config import APP_NAME, APP_VERSION

logger = logging.getLogger(__name__)


def export_json(results: List[FormatResult], output_path: str) -> bool:
    """
    Export operation results as a structured JSON file.

    Args:
        results: List of FormatResult objects
        output_path: Output JSON file path

    Returns:
        True on success
    """
    try:
        report = {
            "generator": f"{APP_NAME} v{APP_VERSION}",
            "generated_at": datetime.now().isoformat(),
            "summary": {
                "total_files": len(results),
                "passed": sum(1 for r in results if r.is_success),
                "failed": sum(1 for r in results if not r.is_success),
            },
            "files": [],
        }

        for r in results:
            report["files"].append({
                "source": r.source,
                "operation": str(r.operation),
                "status": r.status,
                "indent_width": r.indent_width,
                "duration_ms": r.duration_ms,
                "error": None if r.error is None else {
                    "kind": str(r.error.kind),
                    "message": r.error.message,
                    "line": r.error.line,
                    "col": r.error.col,
                    "detail": r.error.detail,
                },
            })

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        logger.info("JSON report exported to %s", output_path)
        return True

    except OSError as e:
        logger.error("Failed to export JSON report: %s", e)
        return False
