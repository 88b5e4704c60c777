from src.school_attendance.school_attendance.core.enums import AttendanceStatus
from src.school_attendance.school_attendance.recap.model import RecapRow, StatusSummary
from src.school_attendance.school_attendance.recap.summary import (
    format_percent,
    percent_display,
    summarize_recap_rows,
    summarize_statuses,
)


def test_summarize_recap_dicts():
    rows = [
        {"hadir": 5, "alpa": 1, "izin": 0, "sakit": 2},
        {"hadir": 3, "alpa": 0, "izin": 1, "sakit": 0},
    ]

    summary = summarize_recap_rows(rows)

    assert (summary.present, summary.absent, summary.excused, summary.sick) == (8, 1, 1, 2)


def test_missing_counters_default_to_zero():
    rows = [
        RecapRow(name="A", class_label="1", present=4),
        RecapRow.from_payload({"nama": "B", "kelas": "1", "hadir": "2", "sakit": None, "izin": "x"}),
    ]

    summary = summarize_recap_rows(rows)

    assert summary == StatusSummary(present=6, excused=0, sick=0, absent=0)


def test_summarize_statuses_applies_unmarked_policy():
    statuses = [AttendanceStatus.SAKIT, None, None, AttendanceStatus.ALPHA]

    with_default = summarize_statuses(statuses)
    without_default = summarize_statuses(statuses, unmarked_default=None)

    assert with_default.present == 2
    assert with_default.total == 4
    assert without_default.present == 0
    assert without_default.total == 2


def test_percent_is_none_for_empty_summary():
    summary = StatusSummary()

    assert summary.percent(AttendanceStatus.HADIR) is None
    assert set(percent_display(summary).values()) == {"N/A"}


def test_percent_rounded_to_two_decimals():
    summary = StatusSummary(present=2, excused=1, sick=0, absent=0)

    assert summary.percent(AttendanceStatus.HADIR) == 66.67
    assert format_percent(summary.percent(AttendanceStatus.IZIN)) == "33.33%"
