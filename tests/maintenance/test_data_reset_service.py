from __future__ import annotations

import pytest

from src.school_attendance.school_attendance.core.enums import Signal
from src.school_attendance.school_attendance.core.events import EventBus
from src.school_attendance.school_attendance.core.exceptions import (
    RemoteApiError,
    RemoteConnectionError,
    RemoteTimeoutError,
)
from src.school_attendance.school_attendance.gateway.connection import ApiConfig
from src.school_attendance.school_attendance.maintenance.service import DataResetService
from src.school_attendance.school_attendance.storage.local_store import LocalStore


class FakeClient:
    def __init__(self, checked=None, error=None):
        self.config = ApiConfig(endpoint="http://testserver/exec")
        self.checked = checked
        self.error = error
        self.checked_calls = []
        self.discarded = []

    def post_checked(self, payload, *, timeout=None):
        self.checked_calls.append((payload, timeout))
        if self.error:
            raise self.error
        return self.checked

    def post_discarding_response(self, payload):
        self.discarded.append(payload)


def _store(tmp_path) -> LocalStore:
    store = LocalStore(str(tmp_path / "store.json"))
    store.set("students", [{"nisn": "1"}])
    store.set("dataSiswa", [])
    store.set("kelas_siswa_cache", [])
    store.set("theme", "dark")
    return store


def _recorder(events: EventBus) -> list:
    seen = []
    events.subscribe(Signal.DATA_CLEARED, lambda: seen.append(Signal.DATA_CLEARED))
    events.subscribe(Signal.REFRESH_DATA, lambda: seen.append(Signal.REFRESH_DATA))
    return seen


def test_success_clears_store_and_notifies_in_order(tmp_path):
    client = FakeClient(checked={"success": True, "message": "Data dihapus"})
    store = _store(tmp_path)
    events = EventBus()
    seen = _recorder(events)

    result = DataResetService(client, store, events).delete_everything()

    assert client.checked_calls == [({"type": "deleteAllDataDataSiswanAbsensi", "sheet": "both"}, 30)]
    assert result.used_fallback is False
    assert result.message == "Data dihapus"
    assert store.keys() == ["theme"]
    assert seen == [Signal.DATA_CLEARED, Signal.REFRESH_DATA]


def test_connection_failure_retries_once_without_response(tmp_path):
    client = FakeClient(error=RemoteConnectionError("CORS"))
    events = EventBus()
    seen = _recorder(events)

    result = DataResetService(client, _store(tmp_path), events).delete_everything()

    assert result.used_fallback is True
    assert client.discarded == [{"type": "deleteAllDataDataSiswanAbsensi", "sheet": "both"}]
    assert seen == [Signal.DATA_CLEARED, Signal.REFRESH_DATA]


def test_timeout_is_not_retried(tmp_path):
    client = FakeClient(error=RemoteTimeoutError("timeout"))
    store = _store(tmp_path)
    events = EventBus()
    seen = _recorder(events)

    with pytest.raises(RemoteTimeoutError):
        DataResetService(client, store, events).delete_everything()

    assert client.discarded == []
    assert "students" in store.keys()
    assert seen == []


def test_rejected_request_keeps_local_data(tmp_path):
    client = FakeClient(checked={"success": False, "message": "Sheet terkunci"})
    store = _store(tmp_path)

    with pytest.raises(RemoteApiError, match="Sheet terkunci"):
        DataResetService(client, store, EventBus()).delete_everything()

    assert "students" in store.keys()
