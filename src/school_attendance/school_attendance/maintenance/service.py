from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import Signal
from ..core.events import EventBus
from ..core.exceptions import RemoteApiError, RemoteConnectionError
from ..gateway.connection import ApiClient
from ..storage.local_store import LocalStore

logger = logging.getLogger(__name__)

DELETE_EVERYTHING_PAYLOAD = {"type": "deleteAllDataDataSiswanAbsensi", "sheet": "both"}


@dataclass(frozen=True)
class ResetResult:
    used_fallback: bool
    message: str
    cleared_keys: list[str] = field(default_factory=list)


class DataResetService:
    """Wipes the roster and attendance sheets, then the local cache.

    The checked request gets a longer timeout. When the endpoint cannot be
    reached at all, the request is resent once without reading the response
    and the outcome is reported as unverified.
    """

    def __init__(
        self,
        client: ApiClient,
        store: LocalStore,
        events: EventBus,
        *,
        timeout: Optional[float] = None,
    ):
        self._client = client
        self._store = store
        self._events = events
        self._timeout = timeout if timeout is not None else client.config.delete_all_timeout

    def delete_everything(self) -> ResetResult:
        try:
            body = self._client.post_checked(DELETE_EVERYTHING_PAYLOAD, timeout=self._timeout)
        except RemoteConnectionError as e:
            logger.warning("delete-all checked request failed (%s); resending without response", e)
            self._client.post_discarding_response(DELETE_EVERYTHING_PAYLOAD)
            return self._finish(
                used_fallback=True,
                message="Permintaan hapus data terkirim, namun hasilnya tidak dapat diverifikasi",
            )

        if not isinstance(body, dict) or not body.get("success"):
            message = body.get("message") if isinstance(body, dict) else None
            raise RemoteApiError(message or "Gagal menghapus data")
        return self._finish(used_fallback=False, message=body.get("message") or "Semua data berhasil dihapus")

    def _finish(self, *, used_fallback: bool, message: str) -> ResetResult:
        cleared = self._store.clear_known_data()
        self._events.publish(Signal.DATA_CLEARED)
        self._events.publish(Signal.REFRESH_DATA)
        logger.info("all data deleted (fallback=%s)", used_fallback)
        return ResetResult(used_fallback=used_fallback, message=message, cleared_keys=cleared)
