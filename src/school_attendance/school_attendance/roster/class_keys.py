from __future__ import annotations

import re
from typing import Iterable, Optional

from ..core.constants import ALL_LABEL

_ABSENT_MARKERS = frozenset({"", "undefined", "null"})
_NUMERIC = re.compile(r"^\d+$")


def normalize_class_label(raw: object) -> Optional[str]:
    """Canonical class label, or None when the cell is effectively empty."""
    if raw is None:
        return None
    label = str(raw).strip()
    if label in _ABSENT_MARKERS:
        return None
    return label


def normalize_text(raw: object) -> Optional[str]:
    """Same absent-value rules as class labels, for names and NISN cells."""
    return normalize_class_label(raw)


def is_numeric_label(label: str) -> bool:
    return bool(_NUMERIC.match(label))


def class_sort_key(label: str) -> tuple:
    # numeric labels first (by value), then the rest lexicographically
    if is_numeric_label(label):
        return (0, int(label), "")
    return (1, 0, label)


def sort_class_labels(labels: Iterable[str]) -> list[str]:
    return sorted(labels, key=class_sort_key)


def collect_unique_classes(students: Iterable) -> list[str]:
    """Filter options for the class selector: ``Semua`` then the sorted labels.

    Accepts Student objects (``class_label``) or raw roster dicts (``kelas``).
    """

    labels: set[str] = set()
    for s in students:
        raw = s.get("kelas") if isinstance(s, dict) else getattr(s, "class_label", None)
        label = normalize_class_label(raw)
        if label is not None:
            labels.add(label)
    return [ALL_LABEL, *sort_class_labels(labels)]
