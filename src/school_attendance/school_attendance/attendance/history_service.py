from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.constants import ALL_LABEL, HISTORY_SHEET_NAME
from ..core.enums import AttendanceStatus, Signal
from ..core.events import EventBus
from ..core.exceptions import RemoteError, ValidationError
from ..recap.filters import RecordFilter, reject_malformed, unique_student_names
from ..roster.model import Student
from .edit_buffer import AttendanceEditBuffer, CommitResult
from .model import AttendanceHistoryRecord, EditKey
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryRow:
    record: AttendanceHistoryRecord
    edited: bool

    def to_dict(self) -> dict:
        return {**self.record.to_payload(), "edited": self.edited}


class HistoryService:
    """Attendance history screen: clean fetch, filters and pending status edits."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        buffer: Optional[AttendanceEditBuffer] = None,
        events: Optional[EventBus] = None,
    ):
        self._attendance = attendance
        self._buffer = buffer or AttendanceEditBuffer()
        # rows as fetched; pending edits are applied on read
        self._fetched: list[AttendanceHistoryRecord] = []
        self._unsubscribe = events.subscribe(Signal.DATA_CLEARED, self._on_data_cleared) if events else None

    def close(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    @property
    def buffer(self) -> AttendanceEditBuffer:
        return self._buffer

    def records(self) -> list[AttendanceHistoryRecord]:
        return [r.with_status(self._buffer.resolve(r.key, r.status)) for r in self._fetched]

    def refresh(self) -> list[AttendanceHistoryRecord]:
        """Refetch history; unsaved edits are re-applied on top of the fresh rows."""
        try:
            raw = self._attendance.list_history_raw()
        except RemoteError as e:
            # no stale rows after a failed fetch
            self._fetched = []
            logger.warning("history fetch failed: %s", e)
            raise
        self._fetched = [AttendanceHistoryRecord.from_payload(r) for r in reject_malformed(list(raw))]
        return self.records()

    def view(self, record_filter: RecordFilter = RecordFilter()) -> list[HistoryRow]:
        return [HistoryRow(record=r, edited=self._buffer.is_pending(r.key)) for r in record_filter.apply(self.records())]

    def name_options(self, students: Iterable[Student], class_label: str = ALL_LABEL) -> list[str]:
        """Name filter options from the roster students of the selected class."""
        return unique_student_names(students, class_label)

    def set_status(self, key: EditKey, status: AttendanceStatus) -> list[AttendanceHistoryRecord]:
        """Override the status of every row sharing ``key``; returns the updated rows."""
        status = AttendanceStatus(status)
        if not any(r.key == key for r in self._fetched):
            raise ValidationError("Data absensi tidak ditemukan")
        self._buffer.set_status(key, status)
        return [r for r in self.records() if r.key == key]

    def save_changes(self) -> CommitResult:
        result = self._buffer.commit(self._attendance.bulk_update)
        if result.sent:
            logger.info("sent %d status update(s); server apply not confirmed", result.update_count)
        return result

    def discard_changes(self) -> int:
        return self._buffer.discard()

    def delete_all(self) -> None:
        self._attendance.delete_all(sheet_name=HISTORY_SHEET_NAME)
        self._reset()
        logger.info("attendance sheet '%s' cleared", HISTORY_SHEET_NAME)

    def _reset(self) -> None:
        self._fetched = []
        self._buffer.discard()

    def _on_data_cleared(self) -> None:
        self._reset()
