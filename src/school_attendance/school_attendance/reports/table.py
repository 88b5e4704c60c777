from __future__ import annotations

import math
from typing import Any, Iterable, Optional

from ..core.constants import NOT_AVAILABLE, PERCENT_LABEL, REPORT_HEADERS, TOTAL_LABEL
from ..core.enums import AttendanceStatus
from ..recap.model import RecapRow, StatusSummary
from ..recap.summary import format_percent

Cell = Any

# column order after Nama/Kelas
COLUMN_STATUSES = (
    AttendanceStatus.HADIR,
    AttendanceStatus.ALPHA,
    AttendanceStatus.IZIN,
    AttendanceStatus.SAKIT,
)


def _plain_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def format_row_percent(value: Optional[float]) -> str:
    if value is None or not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{_plain_number(value)}%"


def recap_row_cells(row: RecapRow) -> list[Cell]:
    return [
        row.name or NOT_AVAILABLE,
        row.class_label or NOT_AVAILABLE,
        row.present or 0,
        row.absent or 0,
        row.excused or 0,
        row.sick or 0,
        format_row_percent(row.percent_present),
    ]


def build_table(rows: Iterable[RecapRow], summary: StatusSummary) -> list[list[Cell]]:
    """Rows of cells shared by every export back-end.

    Header, one line per recap row, then TOTAL and PERSEN lines.
    """

    table: list[list[Cell]] = [list(REPORT_HEADERS)]
    table.extend(recap_row_cells(r) for r in rows)
    table.append([TOTAL_LABEL, "", *(summary.count(s) for s in COLUMN_STATUSES), ""])
    table.append([PERCENT_LABEL, "", *(format_percent(summary.percent(s)) for s in COLUMN_STATUSES), ""])
    return table
