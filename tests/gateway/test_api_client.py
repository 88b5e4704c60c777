from __future__ import annotations

import json

import pytest
import requests

from src.school_attendance.school_attendance.core.exceptions import (
    RemoteApiError,
    RemoteConnectionError,
    RemoteTimeoutError,
    RemoteTransportError,
)
from src.school_attendance.school_attendance.gateway.connection import ApiClient, ApiConfig
from src.school_attendance.school_attendance.gateway.envelope import unwrap, unwrap_list


class FakeResponse:
    def __init__(self, body=None, status=200):
        self.body = body
        self.status_code = status
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self.body is None:
            raise ValueError("no json")
        return self.body

    def close(self):
        self.closed = True


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse({})
        self.error = error
        self.requests = []

    def get(self, url, params=None, timeout=None):
        self.requests.append(("GET", url, params, timeout))
        if self.error:
            raise self.error
        return self.response

    def post(self, url, data=None, headers=None, timeout=None):
        self.requests.append(("POST", url, json.loads(data), timeout))
        if self.error:
            raise self.error
        return self.response


CONFIG = ApiConfig(endpoint="http://testserver/exec", timeout=15, delete_all_timeout=30)


def test_get_json_sends_action_and_params():
    session = FakeSession(FakeResponse({"success": True, "data": []}))
    client = ApiClient(CONFIG, session=session)

    client.get_json("monthlyRecap", kelas="1", bulan="mei")

    assert session.requests == [
        ("GET", "http://testserver/exec", {"action": "monthlyRecap", "kelas": "1", "bulan": "mei"}, 15)
    ]


def test_discarding_post_ignores_error_status():
    response = FakeResponse(None, status=500)
    session = FakeSession(response)
    client = ApiClient(CONFIG, session=session)

    client.post_discarding_response({"type": "delete", "nisn": "1"})

    assert session.requests[0][2] == {"type": "delete", "nisn": "1"}
    assert response.closed


def test_checked_post_uses_given_timeout_and_returns_body():
    session = FakeSession(FakeResponse({"success": True}))
    client = ApiClient(CONFIG, session=session)

    assert client.post_checked({"type": "x"}, timeout=30) == {"success": True}
    assert session.requests[0][3] == 30


@pytest.mark.parametrize(
    "error, expected",
    [
        (requests.Timeout("slow"), RemoteTimeoutError),
        (requests.ConnectionError("refused"), RemoteConnectionError),
        (requests.RequestException("boom"), RemoteTransportError),
    ],
)
def test_transport_errors_are_translated(error, expected):
    client = ApiClient(CONFIG, session=FakeSession(error=error))

    with pytest.raises(expected):
        client.post_checked({"type": "x"})


def test_checked_post_non_ok_status_is_transport_error():
    client = ApiClient(CONFIG, session=FakeSession(FakeResponse({"success": True}, status=502)))

    with pytest.raises(RemoteTransportError):
        client.post_checked({"type": "x"})


def test_envelope_unwrap():
    assert unwrap_list({"success": True, "data": None}) == []
    assert unwrap({"success": True, "data": {"a": 1}}) == {"a": 1}
    with pytest.raises(RemoteApiError) as exc:
        unwrap({"success": False, "message": "Tidak ada data di sheet Absensi"})
    assert exc.value.message == "Tidak ada data di sheet Absensi"
