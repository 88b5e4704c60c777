from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_DELETE_ALL_TIMEOUT, DEFAULT_REQUEST_TIMEOUT
from ..core.exceptions import RemoteConnectionError, RemoteTimeoutError, RemoteTransportError

logger = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    endpoint: str
    timeout: float = DEFAULT_REQUEST_TIMEOUT
    delete_all_timeout: float = DEFAULT_DELETE_ALL_TIMEOUT


class ApiClient:
    """Thin client over the spreadsheet web-app endpoint.

    Note: Two write modes exist. ``post_discarding_response`` mirrors the
    browser's opaque no-cors POST: success only means the request was sent.
    ``post_checked`` reads and returns the JSON body.
    """

    _JSON_HEADERS = {"Content-Type": "application/json"}

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    @property
    def config(self) -> ApiConfig:
        return self._config

    def get_json(self, action: Optional[str] = None, **params: Any) -> Any:
        query = {"action": action, **params} if action else dict(params)
        logger.debug("GET %s params=%s", self._config.endpoint, query)
        try:
            resp = self._session.get(self._config.endpoint, params=query or None, timeout=self._config.timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.Timeout as e:
            raise RemoteTimeoutError(f"Permintaan {action or 'roster'} timeout") from e
        except requests.ConnectionError as e:
            raise RemoteConnectionError(str(e)) from e
        except (requests.RequestException, ValueError) as e:
            raise RemoteTransportError(str(e)) from e

    def post_discarding_response(self, payload: Any) -> None:
        """Send a write and ignore whatever comes back."""
        logger.debug("POST (discard) type=%s", _payload_type(payload))
        try:
            resp = self._session.post(
                self._config.endpoint,
                data=json.dumps(payload),
                headers=self._JSON_HEADERS,
                timeout=self._config.timeout,
            )
        except requests.Timeout as e:
            raise RemoteTimeoutError(str(e)) from e
        except requests.ConnectionError as e:
            raise RemoteConnectionError(str(e)) from e
        except requests.RequestException as e:
            raise RemoteTransportError(str(e)) from e
        resp.close()

    def post_checked(self, payload: Any, *, timeout: Optional[float] = None) -> Any:
        timeout = timeout if timeout is not None else self._config.timeout
        logger.debug("POST (checked, timeout=%ss) type=%s", timeout, _payload_type(payload))
        try:
            resp = self._session.post(
                self._config.endpoint,
                data=json.dumps(payload),
                headers=self._JSON_HEADERS,
                timeout=timeout,
            )
            resp.raise_for_status()
            return resp.json()
        except requests.Timeout as e:
            raise RemoteTimeoutError("Permintaan timeout") from e
        except requests.ConnectionError as e:
            raise RemoteConnectionError(str(e)) from e
        except (requests.RequestException, ValueError) as e:
            raise RemoteTransportError(str(e)) from e


def _payload_type(payload: Any) -> str:
    if isinstance(payload, dict):
        return str(payload.get("type", "-"))
    if isinstance(payload, list):
        return f"list[{len(payload)}]"
    return type(payload).__name__
