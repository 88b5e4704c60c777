from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import AttendanceStatus
from ..roster.class_keys import normalize_class_label, normalize_text


def to_count(value: Any) -> int:
    """Spreadsheet cell -> non-negative int; anything unusable counts as 0."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    return max(int(number), 0)


def to_percent(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool) or value == "":
        return None
    try:
        number = float(str(value).rstrip("%"))
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


@dataclass(frozen=True)
class RecapRow:
    """Baris rekap bulanan/semester, dihitung oleh spreadsheet (read-only)."""

    name: Optional[str]
    class_label: Optional[str]
    present: Optional[int] = None
    absent: Optional[int] = None
    excused: Optional[int] = None
    sick: Optional[int] = None
    percent_present: Optional[float] = None
    period: Optional[str] = None

    @classmethod
    def from_payload(cls, raw: Mapping[str, Any], *, period: Optional[str] = None) -> "RecapRow":
        def count_or_none(key: str) -> Optional[int]:
            return None if raw.get(key) is None else to_count(raw.get(key))

        return cls(
            name=normalize_text(raw.get("nama")),
            class_label=normalize_class_label(raw.get("kelas")),
            present=count_or_none("hadir"),
            absent=count_or_none("alpa"),
            excused=count_or_none("izin"),
            sick=count_or_none("sakit"),
            percent_present=to_percent(raw.get("persenHadir")),
            period=period,
        )

    def to_dict(self) -> dict:
        return {
            "nama": self.name,
            "kelas": self.class_label,
            "hadir": self.present or 0,
            "alpa": self.absent or 0,
            "izin": self.excused or 0,
            "sakit": self.sick or 0,
            "persenHadir": self.percent_present,
        }


@dataclass(frozen=True)
class StatusSummary:
    present: int = 0
    excused: int = 0
    sick: int = 0
    absent: int = 0

    @property
    def total(self) -> int:
        return self.present + self.excused + self.sick + self.absent

    def count(self, status: AttendanceStatus) -> int:
        return {
            AttendanceStatus.HADIR: self.present,
            AttendanceStatus.IZIN: self.excused,
            AttendanceStatus.SAKIT: self.sick,
            AttendanceStatus.ALPHA: self.absent,
        }[AttendanceStatus(status)]

    def percent(self, status: AttendanceStatus) -> Optional[float]:
        """Share of ``status`` in percent (2 decimals); None for an empty dataset."""
        total = self.total
        if total == 0:
            return None
        return round(self.count(status) / total * 100, 2)

    def to_dict(self) -> dict[str, int]:
        return {s.value: self.count(s) for s in AttendanceStatus}
