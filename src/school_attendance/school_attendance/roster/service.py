from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_non_empty, split_lines
from ..core.constants import ALL_LABEL
from ..core.enums import Signal
from ..core.events import EventBus
from ..core.exceptions import ValidationError
from ..storage.local_store import LocalStore
from .class_keys import collect_unique_classes, normalize_class_label
from .model import NewStudent, Student
from .repository import RosterRepository

logger = logging.getLogger(__name__)

ROSTER_CACHE_KEY = "students"


class RosterService:
    """Roster CRUD plus the cached student list other views read from.

    Writes go out in discard-response mode, so a returned call only means the
    request was sent. Call ``refresh()`` afterwards to see the server state.
    """

    def __init__(self, roster: RosterRepository, *, store: Optional[LocalStore] = None, events: Optional[EventBus] = None):
        self._roster = roster
        self._store = store
        self._students: list[Student] = []
        self._unsubscribe = events.subscribe(Signal.DATA_CLEARED, self._on_data_cleared) if events else None

    def close(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    @property
    def students(self) -> list[Student]:
        return list(self._students)

    def refresh(self) -> list[Student]:
        self._students = list(self._roster.list_students())
        if self._store is not None:
            self._store.set(ROSTER_CACHE_KEY, [s.to_payload() for s in self._students])
        return self.students

    def classes(self) -> list[str]:
        return collect_unique_classes(self._students)

    def in_class(self, class_label: str = ALL_LABEL) -> list[Student]:
        if class_label == ALL_LABEL:
            return self.students
        return [s for s in self._students if s.class_label == class_label.strip()]

    def search(self, query: str = "", class_label: str = ALL_LABEL) -> list[Student]:
        q = (query or "").strip().lower()
        result = []
        for s in self.in_class(class_label):
            if q and not ((s.name and q in s.name.lower()) or (s.nisn and q in s.nisn.lower())):
                continue
            result.append(s)
        return result

    def add_student(self, *, nisn: str, name: str, class_label: str) -> NewStudent:
        student = self._new_student(nisn, name, class_label)
        self._roster.add(student)
        logger.info("student %s sent for creation", student.nisn)
        return student

    def bulk_add(self, *, nisn_block: str, name_block: str, class_block: str) -> list[NewStudent]:
        """Import students from three parallel newline-separated columns."""

        if not (nisn_block or "").strip() or not (name_block or "").strip() or not (class_block or "").strip():
            raise ValidationError("Semua field data massal wajib diisi!")

        nisns = split_lines(nisn_block)
        names = split_lines(name_block)
        classes = split_lines(class_block)
        if not (len(nisns) == len(names) == len(classes)):
            raise ValidationError("Jumlah baris data NISN, Nama, dan Kelas harus sama!")
        if not nisns:
            raise ValidationError("Tidak ada data yang valid untuk diimport!")

        students = [NewStudent(nisn=n, name=m, class_label=k) for n, m, k in zip(nisns, names, classes)]
        self._roster.add_many(students)
        logger.info("bulk import of %d student(s) sent", len(students))
        return students

    def edit_student(self, *, old_nisn: str, nisn: str, name: str, class_label: str) -> NewStudent:
        old = require_non_empty(old_nisn, "NISN lama")
        student = self._new_student(nisn, name, class_label)
        self._roster.update(old_nisn=old, student=student)
        logger.info("student %s sent for update (now %s)", old, student.nisn)
        return student

    def delete_student(self, nisn: Optional[str]) -> None:
        if not nisn or not str(nisn).strip():
            raise ValidationError("NISN tidak valid untuk penghapusan.")
        self._roster.delete(str(nisn).strip())
        logger.info("student %s sent for deletion", nisn)

    @staticmethod
    def _new_student(nisn: str, name: str, class_label: str) -> NewStudent:
        if not ((nisn or "").strip() and (name or "").strip() and (class_label or "").strip()):
            raise ValidationError("Semua field wajib diisi!")
        label = normalize_class_label(class_label)
        if label is None:
            raise ValidationError("Kelas tidak valid")
        return NewStudent(nisn=nisn.strip(), name=name.strip(), class_label=label)

    def _on_data_cleared(self) -> None:
        self._students = []
