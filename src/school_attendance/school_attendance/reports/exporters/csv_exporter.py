from __future__ import annotations

import csv
import io

from ..model import ReportDocument
from .base import ReportExporter


class CsvReportExporter(ReportExporter):
    extension = "csv"
    mimetype = "text/csv"

    def render(self, document: ReportDocument) -> bytes:
        out = io.StringIO()
        writer = csv.writer(out)
        for row in document.table:
            writer.writerow(row)
        return out.getvalue().encode("utf-8-sig")
