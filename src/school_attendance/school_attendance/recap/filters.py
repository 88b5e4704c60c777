from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence, TypeVar

from ..common.datetime_utils import normalize_history_date
from ..core.constants import ALL_LABEL, SPREADSHEET_ERROR_MARKERS
from ..core.enums import AttendanceStatus
from ..roster.class_keys import normalize_class_label

logger = logging.getLogger(__name__)

T = TypeVar("T")

HISTORY_FIELDS = ("tanggal", "nama", "nisn", "kelas", "status")


@dataclass(frozen=True)
class RecordFilter:
    """Client-side filter over recap or history rows.

    ``Semua`` for class or name and an empty date mean "no restriction".
    ``period`` only restricts rows that carry a period tag.
    """

    class_label: str = ALL_LABEL
    student_name: str = ALL_LABEL
    date: str = ""
    period: Optional[str] = None

    @classmethod
    def from_inputs(
        cls,
        class_label: Optional[str] = None,
        student_name: Optional[str] = None,
        date: Optional[str] = None,
        period: Optional[str] = None,
    ) -> "RecordFilter":
        """Build from raw form values; a date-picker value is converted to dd/mm/yyyy."""
        return cls(
            class_label=(class_label or "").strip() or ALL_LABEL,
            student_name=student_name or ALL_LABEL,
            date=normalize_history_date(date) if date and date.strip() else "",
            period=period or None,
        )

    def matches(self, row: Any) -> bool:
        if self.class_label != ALL_LABEL:
            if normalize_class_label(getattr(row, "class_label", None)) != self.class_label.strip():
                return False
        if self.student_name != ALL_LABEL and getattr(row, "name", None) != self.student_name:
            return False
        if self.date and getattr(row, "date", None) != self.date:
            return False
        if self.period is not None:
            row_period = getattr(row, "period", None)
            if row_period is not None and row_period != self.period:
                return False
        return True

    def apply(self, rows: Iterable[T]) -> list[T]:
        return [r for r in rows if self.matches(r)]


def _is_clean_cell(value: Any) -> bool:
    if value is None:
        return False
    text = str(value)
    if not text.strip():
        return False
    if text.startswith("="):
        return False
    if text in SPREADSHEET_ERROR_MARKERS:
        return False
    return "FORMULA" not in text


def is_clean_history_payload(raw: Mapping[str, Any]) -> bool:
    """False for rows carrying formula text, error cells or blanks in any field."""
    if not all(_is_clean_cell(raw.get(field)) for field in HISTORY_FIELDS):
        return False
    return str(raw.get("status")) in AttendanceStatus.labels()


def reject_malformed(rows: Sequence[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
    clean = [r for r in rows if is_clean_history_payload(r)]
    dropped = len(rows) - len(clean)
    if dropped:
        logger.warning("dropped %d malformed history row(s) out of %d", dropped, len(rows))
    return clean


def unique_student_names(students: Iterable[Any], class_label: str = ALL_LABEL) -> list[str]:
    """Name filter options: ``Semua`` then the sorted names of the selected class."""
    names = set()
    for s in students:
        if class_label != ALL_LABEL and normalize_class_label(getattr(s, "class_label", None)) != class_label.strip():
            continue
        name = getattr(s, "name", None)
        if name is not None and name.strip():
            names.add(name)
    return [ALL_LABEL, *sorted(names)]
