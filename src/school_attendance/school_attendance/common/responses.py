from __future__ import annotations

import logging
from typing import Any, Callable

from flask import jsonify

from ..core.exceptions import RemoteApiError, RemoteTimeoutError, RemoteTransportError, ValidationError

logger = logging.getLogger(__name__)


def ok(data: Any = None, message: str = "", status: int = 200):
    return jsonify({"success": True, "message": message, "data": data}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def handle(action: Callable[[], Any]):
    """Run a route body and map the known error types to JSON responses.

    ValidationError -> 400, endpoint errors -> 502, anything else -> 500.
    """

    try:
        return action()
    except ValidationError as e:
        return fail(str(e), 400)
    except RemoteApiError as e:
        return fail(e.message, 502)
    except RemoteTimeoutError:
        return fail("Permintaan ke server timeout. Coba lagi.", 502)
    except RemoteTransportError as e:
        logger.error("endpoint request failed: %s", e)
        return fail("Gagal terhubung ke server. Periksa koneksi internet.", 502)
    except Exception:
        logger.exception("unhandled error")
        return fail("Terjadi kesalahan sistem", 500)
