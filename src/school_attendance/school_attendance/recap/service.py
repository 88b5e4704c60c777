from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import ALL_LABEL, MONTHS, NO_CLASS_LABEL
from ..core.enums import Semester
from ..core.exceptions import RemoteApiError, RemoteTransportError, ValidationError
from ..reports.table import build_table
from .filters import RecordFilter
from .graph import build_chart, empty_graph_data
from .model import RecapRow, StatusSummary
from .repository import RecapRepository
from .summary import percent_display, summarize_recap_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecapView:
    """UI-ready state of one recap screen (monthly or semester)."""

    title: str
    sheet_name: str
    file_stem: str
    class_label: str
    period_label: str
    rows: list[RecapRow]
    summary: StatusSummary
    table: list[list[Any]]
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "kelas": self.class_label,
            "periode": self.period_label,
            "rows": [r.to_dict() for r in self.rows],
            "summary": self.summary.to_dict(),
            "percent": percent_display(self.summary),
            "table": self.table,
            "error": self.error,
        }


@dataclass(frozen=True)
class GraphView:
    class_label: str
    semester: Semester
    chart: dict
    error: Optional[str] = None
    class_options: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "kelas": self.class_label,
            "semester": self.semester.value,
            "chart": self.chart,
            "classOptions": self.class_options,
            "error": self.error,
        }


def graph_class_options(classes: Iterable[str]) -> list[str]:
    return [NO_CLASS_LABEL, *(c for c in classes if c != ALL_LABEL)]


class RecapService:
    """Wires recap fetches through filter, aggregation and table building."""

    def __init__(self, recap: RecapRepository):
        self._recap = recap

    def monthly(self, class_label: str = ALL_LABEL, month: str = "Oktober", *, year: Optional[int] = None) -> RecapView:
        month = self._parse_month(month)
        class_label = (class_label or "").strip() or ALL_LABEL
        year = year or now_local().year

        rows, error = self._fetch(
            lambda: self._recap.monthly(class_label=class_label, month=month),
            failure=f"Gagal memuat data rekap {month}",
        )
        return self._build_view(
            rows,
            error,
            class_label=class_label,
            period=month,
            title=f"REKAP ABSENSI SISWA KELAS {class_label} {month.upper()} {year}",
            sheet_name="Rekap Bulanan",
            file_stem=f"Rekap_Bulanan_{month}_{class_label}",
        )

    def semester(self, class_label: str = ALL_LABEL, semester: str = "1", *, year: Optional[int] = None) -> RecapView:
        sem = self._parse_semester(semester)
        class_label = (class_label or "").strip() or ALL_LABEL
        year = year or now_local().year

        rows, error = self._fetch(
            lambda: self._recap.semester(class_label=class_label, semester=sem),
            failure=f"Gagal memuat data rekap Semester {sem.value}",
        )
        return self._build_view(
            rows,
            error,
            class_label=class_label,
            period=f"Semester {sem.value}",
            title=f"REKAP ABSENSI SISWA KELAS {class_label} SEMESTER {sem.value} {year}",
            sheet_name=f"Rekap Semester {sem.value}",
            file_stem=f"Rekap_Semester_{sem.value}_{class_label}",
        )

    def graph(
        self,
        class_label: str = NO_CLASS_LABEL,
        semester: str = "2",
        visibility: Optional[Mapping[str, bool]] = None,
        *,
        classes: Sequence[str] = (),
    ) -> GraphView:
        sem = self._parse_semester(semester)
        class_label = (class_label or "").strip() or NO_CLASS_LABEL
        error = None
        try:
            data = self._recap.graph(class_label=class_label, semester=sem)
        except RemoteApiError as e:
            error = f"Gagal memuat data grafik: {e.message}"
            data = empty_graph_data()
        except RemoteTransportError as e:
            logger.error("graph fetch failed: %s", e)
            error = "Gagal memuat data grafik. Cek log untuk detail."
            data = empty_graph_data()
        return GraphView(
            class_label=class_label,
            semester=sem,
            chart=build_chart(data, sem, visibility),
            error=error,
            class_options=graph_class_options(classes),
        )

    def _fetch(self, call: Callable[[], Sequence[RecapRow]], *, failure: str) -> tuple[list[RecapRow], Optional[str]]:
        try:
            return list(call()), None
        except RemoteApiError as e:
            logger.warning("%s: %s", failure, e.message)
            return [], f"{failure}: {e.message}"
        except RemoteTransportError as e:
            logger.error("%s: %s", failure, e)
            return [], f"{failure}. Cek log untuk detail."

    def _build_view(
        self,
        rows: list[RecapRow],
        error: Optional[str],
        *,
        class_label: str,
        period: str,
        title: str,
        sheet_name: str,
        file_stem: str,
    ) -> RecapView:
        filtered = RecordFilter(class_label=class_label, period=period).apply(rows)
        summary = summarize_recap_rows(filtered)
        return RecapView(
            title=title,
            sheet_name=sheet_name,
            file_stem=file_stem,
            class_label=class_label,
            period_label=period,
            rows=filtered,
            summary=summary,
            table=build_table(filtered, summary),
            error=error,
        )

    @staticmethod
    def _parse_month(month: str) -> str:
        for m in MONTHS:
            if m.lower() == (month or "").strip().lower():
                return m
        raise ValidationError(f"Bulan tidak valid: {month}")

    @staticmethod
    def _parse_semester(semester: str) -> Semester:
        try:
            return Semester(str(semester).strip())
        except ValueError:
            raise ValidationError(f"Semester tidak valid: {semester}")
