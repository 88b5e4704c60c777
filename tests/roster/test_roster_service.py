from __future__ import annotations

import pytest

from src.school_attendance.school_attendance.core.enums import Signal
from src.school_attendance.school_attendance.core.events import EventBus
from src.school_attendance.school_attendance.core.exceptions import ValidationError
from src.school_attendance.school_attendance.roster.model import NewStudent, Student
from src.school_attendance.school_attendance.roster.service import RosterService
from src.school_attendance.school_attendance.storage.local_store import LocalStore


class InMemoryRoster:
    def __init__(self, students=None):
        self.students = list(students or [])
        self.calls = []

    def list_students(self):
        return list(self.students)

    def add(self, student: NewStudent) -> None:
        self.calls.append(("add", student))

    def add_many(self, students) -> None:
        self.calls.append(("add_many", list(students)))

    def update(self, *, old_nisn: str, student: NewStudent) -> None:
        self.calls.append(("update", old_nisn, student))

    def delete(self, nisn: str) -> None:
        self.calls.append(("delete", nisn))


def _students():
    return [
        Student(student_id="1", name="Andi", nisn="111", class_label="1"),
        Student(student_id="2", name="Budi", nisn="222", class_label="2"),
        Student(student_id="3", name="Citra", nisn="333", class_label="1"),
    ]


def test_refresh_caches_roster_in_local_store(tmp_path):
    store = LocalStore(str(tmp_path / "store.json"))
    service = RosterService(InMemoryRoster(_students()), store=store)

    service.refresh()

    assert [s["nisn"] for s in store.get("students")] == ["111", "222", "333"]
    assert service.classes() == ["Semua", "1", "2"]


def test_search_matches_name_or_nisn_within_class():
    service = RosterService(InMemoryRoster(_students()))
    service.refresh()

    assert [s.name for s in service.search("an", "Semua")] == ["Andi"]
    assert [s.name for s in service.search("333", "1")] == ["Citra"]
    assert service.search("Budi", "1") == []
    assert len(service.search("", "1")) == 2


def test_add_student_requires_every_field():
    repo = InMemoryRoster()
    service = RosterService(repo)

    with pytest.raises(ValidationError):
        service.add_student(nisn="1", name="", class_label="1")

    assert repo.calls == []


def test_bulk_add_rejects_mismatched_line_counts():
    repo = InMemoryRoster()
    service = RosterService(repo)

    with pytest.raises(ValidationError, match="harus sama"):
        service.bulk_add(nisn_block="1\n2", name_block="A", class_block="1\n1")

    assert repo.calls == []


def test_bulk_add_ignores_blank_lines():
    repo = InMemoryRoster()
    service = RosterService(repo)

    students = service.bulk_add(nisn_block="1\n\n2\n", name_block="A\nB", class_block="1\n 2 ")

    assert [(s.nisn, s.name, s.class_label) for s in students] == [("1", "A", "1"), ("2", "B", "2")]
    assert repo.calls[0][0] == "add_many"


def test_edit_and_delete_send_requests():
    repo = InMemoryRoster()
    service = RosterService(repo)

    service.edit_student(old_nisn="111", nisn="112", name="Andi", class_label="1")
    service.delete_student("222")

    assert repo.calls[0] == ("update", "111", NewStudent(nisn="112", name="Andi", class_label="1"))
    assert repo.calls[1] == ("delete", "222")


def test_delete_requires_nisn():
    service = RosterService(InMemoryRoster())

    with pytest.raises(ValidationError):
        service.delete_student("  ")


def test_data_cleared_signal_empties_roster_until_close():
    events = EventBus()
    service = RosterService(InMemoryRoster(_students()), events=events)
    service.refresh()

    events.publish(Signal.DATA_CLEARED)
    assert service.students == []

    service.close()
    assert events.listener_count(Signal.DATA_CLEARED) == 0
