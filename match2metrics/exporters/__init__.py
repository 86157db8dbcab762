"""CSV and Excel exporters."""

from .csv_exporter import CsvExporter, CSV_HEADERS
from .excel_exporter import ExcelExporter

__all__ = ["CsvExporter", "CSV_HEADERS", "ExcelExporter"]
