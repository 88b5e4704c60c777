from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ExportFormat
from ..core.exceptions import ValidationError
from .exporters.base import ReportExporter
from .exporters.csv_exporter import CsvReportExporter
from .exporters.pdf_exporter import PdfReportExporter
from .exporters.xlsx_exporter import XlsxReportExporter


@dataclass
class ExporterFactory:
    """Factory Pattern: choose the export back-end for a requested format."""

    def for_format(self, fmt: str) -> ReportExporter:
        try:
            export_format = ExportFormat((fmt or "").lower())
        except ValueError:
            raise ValidationError(f"Format export tidak dikenal: {fmt}")

        if export_format == ExportFormat.XLSX:
            return XlsxReportExporter()
        if export_format == ExportFormat.PDF:
            return PdfReportExporter()
        return CsvReportExporter()
