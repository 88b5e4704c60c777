from __future__ import annotations

import io
from typing import Optional

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ...common.datetime_utils import format_long_date
from ...core.constants import NOT_AVAILABLE
from ...school.model import SchoolInfo
from ...school.signature import signature_png_bytes
from ..model import ReportDocument
from .base import ReportExporter

MARGIN = 14 * mm
COLUMN_WIDTHS = [50 * mm] + [20 * mm] * 6
SIGNATURE_SIZE = (50 * mm, 20 * mm)

TITLE_STYLE = ParagraphStyle("title", fontName="Times-Bold", fontSize=14, leading=18, alignment=TA_CENTER)
TEXT_STYLE = ParagraphStyle("text", fontName="Times-Roman", fontSize=10, leading=13, alignment=TA_CENTER)


class PdfReportExporter(ReportExporter):
    extension = "pdf"
    mimetype = "application/pdf"

    def render(self, document: ReportDocument) -> bytes:
        bio = io.BytesIO()
        doc = SimpleDocTemplate(
            bio,
            pagesize=A4,
            leftMargin=MARGIN,
            rightMargin=MARGIN,
            topMargin=MARGIN,
            bottomMargin=MARGIN,
            title=document.title,
        )
        story = [Paragraph(document.title, TITLE_STYLE), Spacer(1, 6 * mm), self._table(document)]
        if document.school is not None:
            story += [Spacer(1, 10 * mm), self._signature_block(document)]
        doc.build(story)
        return bio.getvalue()

    def _table(self, document: ReportDocument) -> Table:
        data = [[str(cell) for cell in row] for row in document.table]
        table = Table(data, colWidths=COLUMN_WIDTHS, repeatRows=1)
        style = [
            ("FONT", (0, 0), (-1, -1), "Times-Roman", 8),
            ("FONT", (0, 0), (-1, 0), "Times-Bold", 8),
            ("BACKGROUND", (0, 0), (-1, 0), colors.Color(1, 1, 0)),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.black),
            ("FONT", (0, -2), (-1, -1), "Times-Bold", 8),
            ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
            ("ALIGN", (1, 0), (-1, -1), "CENTER"),
            ("TOPPADDING", (0, 0), (-1, -1), 2),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 2),
        ]
        # alternate body rows
        for row_idx in range(2, len(data), 2):
            style.append(("BACKGROUND", (0, row_idx), (-1, row_idx), colors.Color(240 / 255, 240 / 255, 240 / 255)))
        table.setStyle(TableStyle(style))
        return table

    def _signature_block(self, document: ReportDocument) -> Table:
        school: SchoolInfo = document.school
        place_date = ""
        if document.sign_date is not None:
            place_date = f"{document.place_name}, {format_long_date(document.sign_date)}"

        left = self._signer("Kepala Sekolah,", school.principal_name, school.principal_nip, school.principal_signature)
        right = [Paragraph(place_date, TEXT_STYLE)] + self._signer(
            "Guru Kelas,", school.teacher_name, school.teacher_nip, school.teacher_signature
        )
        block = Table([[left, right]], colWidths=[90 * mm, 90 * mm])
        block.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "BOTTOM")]))
        return block

    def _signer(self, role: str, name: str, nip: str, signature: str) -> list:
        parts = [Paragraph(role, TEXT_STYLE)]
        image = self._signature_image(signature)
        parts.append(image if image is not None else Spacer(1, SIGNATURE_SIZE[1]))
        parts.append(Paragraph(f"( {name or NOT_AVAILABLE} )", TEXT_STYLE))
        parts.append(Paragraph(f"NIP: {nip or NOT_AVAILABLE}", TEXT_STYLE))
        return parts

    @staticmethod
    def _signature_image(signature: str) -> Optional[Image]:
        png = signature_png_bytes(signature)
        if png is None:
            return None
        return Image(io.BytesIO(png), width=SIGNATURE_SIZE[0], height=SIGNATURE_SIZE[1])
