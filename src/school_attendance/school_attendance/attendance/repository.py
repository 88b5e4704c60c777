from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from .model import DailyAttendanceEntry, StatusUpdate


class AttendanceRepository(Protocol):
    def submit_daily(self, entries: Sequence[DailyAttendanceEntry]) -> None:
        raise NotImplementedError

    def list_history_raw(self) -> Sequence[Mapping[str, Any]]:
        """Raw history rows exactly as the sheet returns them (may contain formula junk)."""

        raise NotImplementedError

    def bulk_update(self, updates: Sequence[StatusUpdate]) -> None:
        raise NotImplementedError

    def delete_all(self, *, sheet_name: str) -> None:
        raise NotImplementedError
