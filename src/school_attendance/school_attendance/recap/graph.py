from __future__ import annotations

from typing import Any, Mapping, Optional

from ..core.constants import MONTHS, SEMESTER_MONTHS
from ..core.enums import AttendanceStatus, Semester
from .model import to_count

# (background, border) per status
STATUS_COLORS = {
    AttendanceStatus.HADIR: ("rgba(75, 192, 192, 0.6)", "rgba(75, 192, 192, 1)"),
    AttendanceStatus.ALPHA: ("rgba(255, 99, 132, 0.6)", "rgba(255, 99, 132, 1)"),
    AttendanceStatus.IZIN: ("rgba(255, 205, 86, 0.6)", "rgba(255, 205, 86, 1)"),
    AttendanceStatus.SAKIT: ("rgba(54, 162, 235, 0.6)", "rgba(54, 162, 235, 1)"),
}

DATASET_ORDER = (
    AttendanceStatus.HADIR,
    AttendanceStatus.ALPHA,
    AttendanceStatus.IZIN,
    AttendanceStatus.SAKIT,
)


def empty_graph_data() -> dict[str, dict[str, int]]:
    return {m: {s.value: 0 for s in DATASET_ORDER} for m in MONTHS}


def build_chart(
    graph_data: Optional[Mapping[str, Any]],
    semester: Semester,
    visibility: Optional[Mapping[str, bool]] = None,
) -> dict:
    """Bar-chart input: month labels of the semester and one dataset per visible status."""

    labels = list(SEMESTER_MONTHS[Semester(semester).value])
    graph_data = graph_data or {}
    visibility = visibility or {}

    datasets = []
    for status in DATASET_ORDER:
        if not visibility.get(status.value, True):
            continue
        background, border = STATUS_COLORS[status]
        data = []
        for month in labels:
            month_counts = graph_data.get(month)
            data.append(to_count(month_counts.get(status.value)) if isinstance(month_counts, Mapping) else 0)
        datasets.append(
            {
                "label": status.value,
                "data": data,
                "backgroundColor": background,
                "borderColor": border,
                "borderWidth": 1,
            }
        )
    return {"labels": labels, "datasets": datasets}
