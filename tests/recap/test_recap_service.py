from __future__ import annotations

import pytest

from src.school_attendance.school_attendance.core.enums import Semester
from src.school_attendance.school_attendance.core.exceptions import (
    RemoteApiError,
    RemoteConnectionError,
    ValidationError,
)
from src.school_attendance.school_attendance.recap.model import RecapRow
from src.school_attendance.school_attendance.recap.service import RecapService


class FakeRecap:
    def __init__(self, rows=None, error=None, graph_data=None):
        self.rows = rows or []
        self.error = error
        self.graph_data = graph_data or {}
        self.calls = []

    def monthly(self, *, class_label: str, month: str):
        self.calls.append(("monthly", class_label, month))
        if self.error:
            raise self.error
        return [RecapRow(**{**r.__dict__, "period": month}) for r in self.rows]

    def semester(self, *, class_label: str, semester: Semester):
        self.calls.append(("semester", class_label, semester))
        if self.error:
            raise self.error
        return [RecapRow(**{**r.__dict__, "period": f"Semester {semester.value}"}) for r in self.rows]

    def graph(self, *, class_label: str, semester: Semester):
        if self.error:
            raise self.error
        return self.graph_data


ROWS = [
    RecapRow(name="Andi", class_label="1", present=5, absent=1, excused=0, sick=2, percent_present=62.5),
    RecapRow(name="Budi", class_label="2", present=3, absent=0, excused=1, sick=0, percent_present=75),
]


def test_monthly_view_builds_title_table_and_summary():
    service = RecapService(FakeRecap(ROWS))

    view = service.monthly("Semua", "mei", year=2024)

    assert view.title == "REKAP ABSENSI SISWA KELAS Semua MEI 2024"
    assert view.file_stem == "Rekap_Bulanan_Mei_Semua"
    assert view.summary.present == 8
    assert view.table[-2] == ["TOTAL", "", 8, 1, 1, 2, ""]
    assert view.error is None


def test_semester_view_filters_by_class():
    repo = FakeRecap(ROWS)
    service = RecapService(repo)

    view = service.semester("2", "2", year=2024)

    assert repo.calls == [("semester", "2", Semester.SECOND)]
    assert [r.name for r in view.rows] == ["Budi"]
    assert view.sheet_name == "Rekap Semester 2"
    assert view.title.endswith("SEMESTER 2 2024")


def test_api_failure_becomes_empty_view_with_message():
    service = RecapService(FakeRecap(ROWS, error=RemoteApiError("Sheet rekap kosong")))

    view = service.monthly("1", "Juni", year=2024)

    assert view.rows == []
    assert view.error == "Gagal memuat data rekap Juni: Sheet rekap kosong"
    assert view.table[-1] == ["PERSEN", "", "N/A", "N/A", "N/A", "N/A", ""]


def test_invalid_month_or_semester():
    service = RecapService(FakeRecap())

    with pytest.raises(ValidationError):
        service.monthly("1", "Maret2")
    with pytest.raises(ValidationError):
        service.semester("1", "3")


def test_graph_falls_back_to_zero_months_on_transport_error():
    service = RecapService(FakeRecap(error=RemoteConnectionError("offline")))

    view = service.graph("1", "1", classes=["Semua", "1", "2"])

    assert view.error is not None
    assert view.class_options == ["Tidak Ada", "1", "2"]
    assert all(v == 0 for d in view.chart["datasets"] for v in d["data"])
