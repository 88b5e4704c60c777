from __future__ import annotations

import re
from datetime import date, datetime

from ..core.constants import MONTHS
from ..core.exceptions import ValidationError

_WIRE_DATE = re.compile(r"^\d{2}/\d{2}/\d{4}$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Tanggal tidak valid: {value!r}")


def to_wire_date(iso_date: str) -> str:
    """Convert a date-picker value (YYYY-MM-DD) to the dd/mm/yyyy write format."""
    return parse_iso_date(iso_date).strftime("%d/%m/%Y")


def normalize_history_date(value: object) -> str:
    """Bring a date cell from the history sheet into dd/mm/yyyy.

    The sheet returns either dd/mm/yyyy text or an ISO timestamp
    (``2024-05-07T00:00:00.000Z``); anything else is kept as-is.
    """
    text = str(value).strip()
    if _WIRE_DATE.match(text):
        return text
    date_part = text.split("T", 1)[0]
    try:
        return datetime.strptime(date_part, "%Y-%m-%d").strftime("%d/%m/%Y")
    except ValueError:
        return text


def month_name(month: int) -> str:
    return MONTHS[month - 1]


def format_long_date(value: date) -> str:
    """Tanggal panjang bahasa Indonesia, mis. ``07 Mei 2024``."""
    return f"{value.day:02d} {month_name(value.month)} {value.year}"


def export_timestamp(now: datetime | None = None) -> str:
    """Timestamp used in export file names: ``07_Mei_2024_13-05``."""
    now = now or now_local()
    return f"{now.day:02d}_{month_name(now.month)}_{now.year}_{now.hour:02d}-{now.minute:02d}"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
