from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import parse_iso_date, to_wire_date
from ..core.constants import ALL_LABEL, NOT_AVAILABLE
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..recap.model import StatusSummary
from ..recap.summary import summarize_statuses
from ..roster.model import Student
from ..roster.service import RosterService
from .model import DailyAttendanceEntry
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailySheetRow:
    student: Student
    status: Optional[AttendanceStatus]
    explicit: bool

    def to_dict(self) -> dict:
        return {
            "id": self.student.student_id,
            "nama": self.student.name or NOT_AVAILABLE,
            "nisn": self.student.nisn or NOT_AVAILABLE,
            "kelas": self.student.class_label or NOT_AVAILABLE,
            "status": self.status.value if self.status else None,
            "explicit": self.explicit,
        }


@dataclass(frozen=True)
class DailySheet:
    date: str
    class_label: str
    rows: list[DailySheetRow]
    summary: StatusSummary


class DailyAttendanceService:
    """Per-date marking sheet for the data-entry screen.

    ``unmarked_default`` decides what an unmarked student counts as. The
    classic behaviour is ``Hadir``; with None nothing is assumed and a sheet
    with unmarked students cannot be submitted.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        roster: RosterService,
        *,
        unmarked_default: Optional[AttendanceStatus] = AttendanceStatus.HADIR,
    ):
        self._attendance = attendance
        self._roster = roster
        self._unmarked_default = unmarked_default
        self._marks: dict[str, dict[str, AttendanceStatus]] = {}

    @property
    def unmarked_default(self) -> Optional[AttendanceStatus]:
        return self._unmarked_default

    def mark(self, date_iso: str, student_id: str, status: AttendanceStatus) -> None:
        parse_iso_date(date_iso)
        self._marks.setdefault(date_iso, {})[student_id] = AttendanceStatus(status)

    def status_for(self, date_iso: str, student_id: str) -> Optional[AttendanceStatus]:
        return self._marks.get(date_iso, {}).get(student_id, self._unmarked_default)

    def sheet(self, date_iso: str, class_label: str = ALL_LABEL) -> DailySheet:
        parse_iso_date(date_iso)
        marks = self._marks.get(date_iso, {})
        students = self._roster.in_class(class_label)
        rows = [
            DailySheetRow(
                student=s,
                status=marks.get(s.student_id, self._unmarked_default),
                explicit=s.student_id in marks,
            )
            for s in students
        ]
        summary = summarize_statuses(
            (marks.get(s.student_id) for s in students),
            unmarked_default=self._unmarked_default,
        )
        return DailySheet(date=date_iso, class_label=class_label, rows=rows, summary=summary)

    def submit(self, date_iso: str, class_label: str = ALL_LABEL) -> list[DailyAttendanceEntry]:
        wire_date = to_wire_date(date_iso)
        sheet = self.sheet(date_iso, class_label)
        if not sheet.rows:
            raise ValidationError("Tidak ada siswa untuk diabsen pada kelas ini")

        unmarked = [r for r in sheet.rows if r.status is None]
        if unmarked:
            raise ValidationError(f"{len(unmarked)} siswa belum diberi status kehadiran")

        entries = [
            DailyAttendanceEntry(
                date=wire_date,
                name=r.student.name or NOT_AVAILABLE,
                class_label=r.student.class_label or NOT_AVAILABLE,
                nisn=r.student.nisn or NOT_AVAILABLE,
                status=r.status,
            )
            for r in sheet.rows
        ]
        self._attendance.submit_daily(entries)
        logger.info("attendance for %s (%s) sent: %d row(s)", wire_date, class_label, len(entries))
        return entries
