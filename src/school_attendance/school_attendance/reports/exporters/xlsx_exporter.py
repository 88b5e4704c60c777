from __future__ import annotations

import io

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from ..model import ReportDocument
from .base import ReportExporter

HEADER_FILL = PatternFill("solid", start_color="FFFF00")
SUMMARY_FILL = PatternFill("solid", start_color="D3D3D3")
COLUMN_WIDTH = 15


class XlsxReportExporter(ReportExporter):
    extension = "xlsx"
    mimetype = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    def render(self, document: ReportDocument) -> bytes:
        wb = Workbook()
        ws = wb.active
        # sheet titles are limited to 31 chars
        ws.title = document.sheet_name[:31] or "Rekap"

        for row in document.table:
            ws.append(row)

        bold = Font(bold=True)
        center = Alignment(horizontal="center", vertical="center")
        thin = Side(style="thin")
        border = Border(left=thin, right=thin, top=thin, bottom=thin)
        width = len(document.table[0])
        last_row = len(document.table)

        for row in ws.iter_rows(min_row=1, max_row=last_row, min_col=1, max_col=width):
            for cell in row:
                cell.border = border

        for col_idx in range(1, width + 1):
            cell = ws.cell(row=1, column=col_idx)
            cell.font = bold
            cell.fill = HEADER_FILL
            cell.alignment = center

        # TOTAL and PERSEN rows
        for row_idx in (last_row - 1, last_row):
            for col_idx in range(1, width + 1):
                cell = ws.cell(row=row_idx, column=col_idx)
                cell.font = bold
                cell.fill = SUMMARY_FILL
                cell.alignment = center

        for col_idx in range(1, width + 1):
            ws.column_dimensions[get_column_letter(col_idx)].width = COLUMN_WIDTH

        ws.page_setup.orientation = ws.ORIENTATION_PORTRAIT
        ws.page_setup.paperSize = ws.PAPERSIZE_A4
        ws.page_setup.fitToWidth = 1
        ws.page_setup.fitToHeight = 0

        bio = io.BytesIO()
        wb.save(bio)
        return bio.getvalue()
