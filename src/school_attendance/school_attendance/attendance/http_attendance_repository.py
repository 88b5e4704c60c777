from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..core.constants import EMPTY_HISTORY_MESSAGE
from ..core.exceptions import RemoteApiError
from ..gateway.connection import ApiClient
from ..gateway.envelope import unwrap_list
from .model import DailyAttendanceEntry, StatusUpdate
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class HttpAttendanceRepository(AttendanceRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def submit_daily(self, entries: Sequence[DailyAttendanceEntry]) -> None:
        # raw array body, no "type" field
        self._client.post_discarding_response([e.to_payload() for e in entries])

    def list_history_raw(self) -> Sequence[Mapping[str, Any]]:
        try:
            rows = unwrap_list(self._client.get_json("attendanceHistory"))
        except RemoteApiError as e:
            if e.message == EMPTY_HISTORY_MESSAGE:
                return []
            raise
        return [r for r in rows if isinstance(r, dict)]

    def bulk_update(self, updates: Sequence[StatusUpdate]) -> None:
        self._client.post_discarding_response(
            {"type": "bulkUpdateAttendance", "updates": [u.to_payload() for u in updates]}
        )

    def delete_all(self, *, sheet_name: str) -> None:
        self._client.post_discarding_response({"type": "deleteAllAttendance", "sheetName": sheet_name})
