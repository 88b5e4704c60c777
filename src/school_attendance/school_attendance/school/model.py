from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class SchoolInfo:
    """Data kepala sekolah & guru kelas untuk blok tanda tangan laporan."""

    principal_name: str
    principal_nip: str
    teacher_name: str
    teacher_nip: str
    principal_signature: str = ""  # PNG data URL
    teacher_signature: str = ""

    @classmethod
    def from_payload(cls, raw: Mapping[str, Any]) -> "SchoolInfo":
        def text(key: str) -> str:
            value = raw.get(key)
            return "" if value is None else str(value).strip()

        return cls(
            principal_name=text("namaKepsek"),
            principal_nip=text("nipKepsek"),
            teacher_name=text("namaGuru"),
            teacher_nip=text("nipGuru"),
            principal_signature=text("ttdKepsek"),
            teacher_signature=text("ttdGuru"),
        )

    def to_payload(self) -> dict:
        return {
            "namaKepsek": self.principal_name,
            "nipKepsek": self.principal_nip,
            "ttdKepsek": self.principal_signature,
            "namaGuru": self.teacher_name,
            "nipGuru": self.teacher_nip,
            "ttdGuru": self.teacher_signature,
        }
