from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status kehadiran harian, nilai = label yang disimpan di spreadsheet."""

    HADIR = "Hadir"
    IZIN = "Izin"
    SAKIT = "Sakit"
    ALPHA = "Alpha"

    @classmethod
    def labels(cls) -> tuple[str, ...]:
        return tuple(s.value for s in cls)

    @classmethod
    def parse(cls, value: object) -> "AttendanceStatus":
        text = str(value).strip() if value is not None else ""
        for status in cls:
            if status.value == text:
                return status
        raise ValueError(f"Unknown attendance status: {value!r}")


class Semester(str, Enum):
    """Semester 1 = Juli-Desember, Semester 2 = Januari-Juni."""

    FIRST = "1"
    SECOND = "2"


class ExportFormat(str, Enum):
    XLSX = "xlsx"
    PDF = "pdf"
    CSV = "csv"


class Signal(str, Enum):
    """Notifikasi antar-view setelah penghapusan data."""

    DATA_CLEARED = "dataCleared"
    REFRESH_DATA = "refreshData"
