from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import RemoteApiError, RemoteTransportError


def unwrap(body: Any) -> Any:
    """Return ``data`` of a ``{success, data, message}`` envelope.

    Raises RemoteApiError with the server message when ``success`` is false.
    """

    if not isinstance(body, dict):
        raise RemoteTransportError(f"Unexpected response shape: {type(body).__name__}")
    if not body.get("success"):
        raise RemoteApiError(body.get("message"))
    return body.get("data")


def unwrap_list(body: Any) -> list:
    data = unwrap(body)
    return list(data or [])


def first_or_none(items: list) -> Optional[Any]:
    return items[0] if items else None
