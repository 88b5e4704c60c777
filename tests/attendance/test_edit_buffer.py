from __future__ import annotations

import pytest

from src.school_attendance.school_attendance.attendance.edit_buffer import AttendanceEditBuffer
from src.school_attendance.school_attendance.core.enums import AttendanceStatus

KEY = ("07/05/2024", "111")


def test_last_pending_write_wins_over_fetched_value():
    buffer = AttendanceEditBuffer()
    buffer.set_status(KEY, AttendanceStatus.SAKIT)
    buffer.set_status(KEY, AttendanceStatus.IZIN)

    assert buffer.resolve(KEY, AttendanceStatus.HADIR) == AttendanceStatus.IZIN
    assert len(buffer) == 1


def test_commit_sends_one_update_per_key_and_clears():
    buffer = AttendanceEditBuffer()
    buffer.set_status(KEY, AttendanceStatus.SAKIT)
    buffer.set_status(("08/05/2024", "111"), AttendanceStatus.ALPHA)
    sent = []

    result = buffer.commit(sent.append)

    assert result.sent is True
    assert result.update_count == 2
    assert result.confirmed is False
    assert [u.to_payload() for u in sent[0]] == [
        {"tanggal": "07/05/2024", "nisn": "111", "status": "Sakit"},
        {"tanggal": "08/05/2024", "nisn": "111", "status": "Alpha"},
    ]
    assert buffer.resolve(KEY, AttendanceStatus.HADIR) == AttendanceStatus.HADIR
    assert not buffer.is_pending(KEY)


def test_commit_on_empty_buffer_does_not_send():
    buffer = AttendanceEditBuffer()
    calls = []

    result = buffer.commit(calls.append)

    assert result.sent is False
    assert calls == []


def test_failed_send_keeps_pending_edits():
    buffer = AttendanceEditBuffer()
    buffer.set_status(KEY, AttendanceStatus.SAKIT)

    def send(_updates):
        raise ConnectionError("offline")

    with pytest.raises(ConnectionError):
        buffer.commit(send)

    assert buffer.pending() == {KEY: AttendanceStatus.SAKIT}


def test_discard_returns_dropped_count():
    buffer = AttendanceEditBuffer()
    buffer.set_status(KEY, "Izin")

    assert buffer.discard() == 1
    assert len(buffer) == 0
