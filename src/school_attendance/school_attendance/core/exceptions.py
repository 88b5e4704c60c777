from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid, before anything is sent."""


class RemoteError(Exception):
    """Base exception for failures talking to the spreadsheet endpoint."""


class RemoteTransportError(RemoteError):
    """Raised when the request could not be sent or returned a non-OK status."""


class RemoteConnectionError(RemoteTransportError):
    """Raised when the endpoint could not be reached at all (DNS, refused, reset)."""


class RemoteTimeoutError(RemoteTransportError):
    """Raised when a response-checked request exceeded its timeout."""


class RemoteApiError(RemoteError):
    """Raised when the endpoint answered with ``success: false``."""

    def __init__(self, message: str | None = None):
        self.message = message or "Permintaan ditolak oleh server"
        super().__init__(self.message)
