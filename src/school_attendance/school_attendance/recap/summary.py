from __future__ import annotations

import math
from typing import Any, Iterable, Mapping, Optional, Union

from ..core.constants import NOT_AVAILABLE
from ..core.enums import AttendanceStatus
from .model import RecapRow, StatusSummary, to_count

RecapLike = Union[RecapRow, Mapping[str, Any]]

_ROW_FIELDS = {
    "present": "hadir",
    "absent": "alpa",
    "excused": "izin",
    "sick": "sakit",
}


def _field(row: RecapLike, attr: str) -> int:
    if isinstance(row, Mapping):
        return to_count(row.get(_ROW_FIELDS[attr]))
    return to_count(getattr(row, attr, None))


def summarize_recap_rows(rows: Iterable[RecapLike]) -> StatusSummary:
    """Sum the four per-row counters. Missing counters count as 0."""
    totals = dict.fromkeys(_ROW_FIELDS, 0)
    for row in rows:
        for attr in _ROW_FIELDS:
            totals[attr] += _field(row, attr)
    return StatusSummary(**totals)


def summarize_statuses(
    statuses: Iterable[Optional[AttendanceStatus]],
    *,
    unmarked_default: Optional[AttendanceStatus] = AttendanceStatus.HADIR,
) -> StatusSummary:
    """Count raw per-student statuses.

    ``None`` entries are unmarked students; they count as ``unmarked_default``
    or are skipped when the policy is None.
    """

    counts = {s: 0 for s in AttendanceStatus}
    for status in statuses:
        effective = status if status is not None else unmarked_default
        if effective is None:
            continue
        counts[AttendanceStatus(effective)] += 1
    return StatusSummary(
        present=counts[AttendanceStatus.HADIR],
        excused=counts[AttendanceStatus.IZIN],
        sick=counts[AttendanceStatus.SAKIT],
        absent=counts[AttendanceStatus.ALPHA],
    )


def format_percent(value: Optional[float]) -> str:
    if value is None or not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{value:.2f}%"


def percent_display(summary: StatusSummary) -> dict[str, str]:
    return {s.value: format_percent(summary.percent(s)) for s in AttendanceStatus}
