from __future__ import annotations

import logging
from typing import Sequence

from ..core.exceptions import RemoteTransportError
from ..gateway.connection import ApiClient
from .model import NewStudent, Student
from .repository import RosterRepository

logger = logging.getLogger(__name__)


class HttpRosterRepository(RosterRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_students(self) -> Sequence[Student]:
        body = self._client.get_json()
        if not isinstance(body, list):
            raise RemoteTransportError("Roster response is not a list")
        students = [Student.from_payload(raw, index=i) for i, raw in enumerate(body) if isinstance(raw, dict)]
        logger.info("fetched %d student(s)", len(students))
        return students

    def add(self, student: NewStudent) -> None:
        self._client.post_discarding_response(
            {"type": "siswa", "nisn": student.nisn, "nama": student.name, "kelas": student.class_label}
        )

    def add_many(self, students: Sequence[NewStudent]) -> None:
        self._client.post_discarding_response(
            {
                "type": "bulk_siswa",
                "students": [{"nisn": s.nisn, "nama": s.name, "kelas": s.class_label} for s in students],
            }
        )

    def update(self, *, old_nisn: str, student: NewStudent) -> None:
        self._client.post_discarding_response(
            {
                "type": "edit",
                "nisnLama": old_nisn,
                "nisnBaru": student.nisn,
                "nama": student.name,
                "kelas": student.class_label,
            }
        )

    def delete(self, nisn: str) -> None:
        self._client.post_discarding_response({"type": "delete", "nisn": nisn})
