from __future__ import annotations

import base64
import binascii
import io
import logging
from typing import Optional

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


def decode_signature(data_url: str) -> Optional[Image.Image]:
    """Decode a ``data:image/png;base64,...`` signature into an RGBA image.

    Returns None for empty or undecodable input.
    """

    if not data_url:
        return None
    payload = data_url.split(",", 1)[1] if data_url.startswith("data:") and "," in data_url else data_url
    try:
        raw = base64.b64decode(payload, validate=True)
        img = Image.open(io.BytesIO(raw))
        img.load()
    except (binascii.Error, ValueError, UnidentifiedImageError, OSError):
        logger.warning("signature image could not be decoded")
        return None
    return img.convert("RGBA")


def signature_png_bytes(data_url: str) -> Optional[bytes]:
    img = decode_signature(data_url)
    if img is None:
        return None
    out = io.BytesIO()
    img.save(out, format="PNG")
    return out.getvalue()
