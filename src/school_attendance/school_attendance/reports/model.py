from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..school.model import SchoolInfo


@dataclass(frozen=True)
class ReportDocument:
    """Everything an exporter needs; the table is the single source of content."""

    title: str
    sheet_name: str
    table: list[list[Any]]
    school: Optional[SchoolInfo] = None
    place_name: str = ""
    sign_date: Optional[date] = None

    @property
    def body_rows(self) -> int:
        # header + TOTAL + PERSEN
        return len(self.table) - 3


@dataclass(frozen=True)
class ExportedFile:
    filename: str
    mimetype: str
    content: bytes
