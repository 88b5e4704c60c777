from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..core.enums import AttendanceStatus
from .model import EditKey, StatusUpdate


@dataclass(frozen=True)
class CommitResult:
    """Outcome of flushing the buffer.

    ``sent`` is True once the batch left the client. ``confirmed`` stays False
    for discard-response sends: the endpoint may still reject the batch and
    nobody will know.
    """

    sent: bool
    update_count: int = 0
    confirmed: bool = False


class AttendanceEditBuffer:
    """Unsaved status overrides for history rows, keyed by (tanggal, nisn).

    Each key is either unedited (absent from the buffer) or pending. Pending
    values win over freshly fetched data until the buffer is committed or
    discarded.
    """

    def __init__(self) -> None:
        self._pending: dict[EditKey, AttendanceStatus] = {}

    def __len__(self) -> int:
        return len(self._pending)

    def __contains__(self, key: object) -> bool:
        return key in self._pending

    def is_pending(self, key: EditKey) -> bool:
        return key in self._pending

    def set_status(self, key: EditKey, status: AttendanceStatus) -> None:
        self._pending[key] = AttendanceStatus(status)

    def resolve(self, key: EditKey, fetched: AttendanceStatus) -> AttendanceStatus:
        return self._pending.get(key, fetched)

    def pending(self) -> dict[EditKey, AttendanceStatus]:
        return dict(self._pending)

    def updates(self) -> list[StatusUpdate]:
        return [StatusUpdate(date=d, nisn=n, status=s) for (d, n), s in self._pending.items()]

    def discard(self) -> int:
        dropped = len(self._pending)
        self._pending.clear()
        return dropped

    def commit(self, send: Callable[[Sequence[StatusUpdate]], Optional[object]]) -> CommitResult:
        if not self._pending:
            return CommitResult(sent=False)

        updates = self.updates()
        # raises -> nothing cleared
        send(updates)
        self._pending.clear()
        return CommitResult(sent=True, update_count=len(updates), confirmed=False)
