from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .class_keys import normalize_class_label, normalize_text


@dataclass(frozen=True)
class Student:
    """Siswa pada roster (sheet DataSiswa). Read-only bagi modul lain."""

    student_id: str
    name: Optional[str]
    nisn: Optional[str]
    class_label: Optional[str]

    @classmethod
    def from_payload(cls, raw: Mapping[str, Any], *, index: int = 0) -> "Student":
        nisn = normalize_text(raw.get("nisn"))
        student_id = normalize_text(raw.get("id")) or nisn or f"row-{index}"
        return cls(
            student_id=student_id,
            name=normalize_text(raw.get("name", raw.get("nama"))),
            nisn=nisn,
            class_label=normalize_class_label(raw.get("kelas")),
        )

    def to_payload(self) -> dict:
        return {"id": self.student_id, "name": self.name, "nisn": self.nisn, "kelas": self.class_label}


@dataclass(frozen=True)
class NewStudent:
    nisn: str
    name: str
    class_label: str
