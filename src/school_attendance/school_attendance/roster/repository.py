from __future__ import annotations

from typing import Protocol, Sequence

from .model import NewStudent, Student


class RosterRepository(Protocol):
    def list_students(self) -> Sequence[Student]:
        raise NotImplementedError

    def add(self, student: NewStudent) -> None:
        raise NotImplementedError

    def add_many(self, students: Sequence[NewStudent]) -> None:
        raise NotImplementedError

    def update(self, *, old_nisn: str, student: NewStudent) -> None:
        raise NotImplementedError

    def delete(self, nisn: str) -> None:
        raise NotImplementedError
