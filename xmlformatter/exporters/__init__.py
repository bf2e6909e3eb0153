"""
Exporters package - Batch report generation in various formats.
"""

from .csv_exporter import export_csv
from .json_exporter import export_json
