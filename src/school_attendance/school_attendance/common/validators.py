from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: object, field_name: str) -> str:
    text = "" if value is None else str(value)
    if not text.strip():
        raise ValidationError(f"{field_name} wajib diisi")
    return text.strip()


def split_lines(block: str) -> list[str]:
    """Split a textarea block into trimmed, non-blank lines."""
    return [line.strip() for line in (block or "").strip().splitlines() if line.strip()]
