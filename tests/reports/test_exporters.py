from __future__ import annotations

import io
from datetime import date

import pytest
from openpyxl import load_workbook

from src.school_attendance.school_attendance.core.exceptions import ValidationError
from src.school_attendance.school_attendance.recap.model import RecapRow
from src.school_attendance.school_attendance.recap.summary import summarize_recap_rows
from src.school_attendance.school_attendance.reports.factory import ExporterFactory
from src.school_attendance.school_attendance.reports.model import ReportDocument
from src.school_attendance.school_attendance.reports.table import build_table
from src.school_attendance.school_attendance.school.model import SchoolInfo


def _document(school=None) -> ReportDocument:
    rows = [RecapRow(name="Andi", class_label="1", present=3, absent=1, excused=0, sick=0, percent_present=75.0)]
    return ReportDocument(
        title="REKAP ABSENSI SISWA KELAS 1 MEI 2024",
        sheet_name="Rekap Bulanan",
        table=build_table(rows, summarize_recap_rows(rows)),
        school=school,
        place_name="Makassar",
        sign_date=date(2024, 5, 31),
    )


def test_csv_export_has_bom_and_all_rows():
    content = ExporterFactory().for_format("csv").render(_document())

    assert content.startswith(b"\xef\xbb\xbf")
    lines = content.decode("utf-8-sig").splitlines()
    assert lines[0] == "Nama,Kelas,Hadir,Alpha,Izin,Sakit,% Hadir"
    assert lines[-1] == "PERSEN,,75.00%,25.00%,0.00%,0.00%,"


def test_xlsx_export_styles_header_and_summary_rows():
    content = ExporterFactory().for_format("XLSX").render(_document())

    ws = load_workbook(io.BytesIO(content)).active
    assert ws.title == "Rekap Bulanan"
    assert ws["A1"].value == "Nama"
    assert ws["A1"].font.bold
    assert ws["A3"].value == "TOTAL"
    assert ws["A4"].font.bold
    assert ws.column_dimensions["A"].width == 15


def test_pdf_export_with_signature_block():
    school = SchoolInfo(principal_name="Hj. Rahma", principal_nip="1970", teacher_name="Sari", teacher_nip="1985")

    content = ExporterFactory().for_format("pdf").render(_document(school))

    assert content.startswith(b"%PDF")


def test_unknown_format_is_rejected():
    with pytest.raises(ValidationError):
        ExporterFactory().for_format("docx")
