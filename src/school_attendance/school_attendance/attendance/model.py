from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..common.datetime_utils import normalize_history_date
from ..core.enums import AttendanceStatus
from ..roster.class_keys import normalize_class_label

EditKey = tuple[str, str]


@dataclass(frozen=True)
class DailyAttendanceEntry:
    """Satu baris absensi harian yang dikirim ke sheet Absensi."""

    date: str  # dd/mm/yyyy
    name: str
    class_label: str
    nisn: str
    status: AttendanceStatus

    def to_payload(self) -> dict:
        return {
            "tanggal": self.date,
            "nama": self.name,
            "kelas": self.class_label,
            "nisn": self.nisn,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class AttendanceHistoryRecord:
    """Read-model riwayat absensi (sudah lolos filter baris rusak)."""

    date: str  # dd/mm/yyyy
    name: str
    class_label: str
    nisn: str
    status: AttendanceStatus

    @property
    def key(self) -> EditKey:
        return (self.date, self.nisn)

    @classmethod
    def from_payload(cls, raw: Mapping[str, Any]) -> "AttendanceHistoryRecord":
        return cls(
            date=normalize_history_date(raw["tanggal"]),
            name=str(raw["nama"]).strip(),
            class_label=normalize_class_label(raw["kelas"]) or "",
            nisn=str(raw["nisn"]).strip(),
            status=AttendanceStatus.parse(raw["status"]),
        )

    def with_status(self, status: AttendanceStatus) -> "AttendanceHistoryRecord":
        return AttendanceHistoryRecord(
            date=self.date,
            name=self.name,
            class_label=self.class_label,
            nisn=self.nisn,
            status=status,
        )

    def to_payload(self) -> dict:
        return {
            "tanggal": self.date,
            "nama": self.name,
            "kelas": self.class_label,
            "nisn": self.nisn,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class StatusUpdate:
    date: str
    nisn: str
    status: AttendanceStatus

    def to_payload(self) -> dict:
        return {"tanggal": self.date, "nisn": self.nisn, "status": self.status.value}
