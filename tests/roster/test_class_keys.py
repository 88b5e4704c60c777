from src.school_attendance.school_attendance.roster.class_keys import (
    collect_unique_classes,
    normalize_class_label,
    sort_class_labels,
)
from src.school_attendance.school_attendance.roster.model import Student


def test_numeric_classes_first_then_lexicographic():
    students = [{"kelas": k} for k in ["3", "10", "2", "1B"]]

    assert collect_unique_classes(students) == ["Semua", "2", "3", "10", "1B"]


def test_collect_unique_classes_deduplicates_and_skips_empty_labels():
    students = [
        Student(student_id="1", name="A", nisn="1", class_label="5"),
        Student(student_id="2", name="B", nisn="2", class_label="5"),
        Student(student_id="3", name="C", nisn="3", class_label=None),
        {"kelas": "undefined"},
        {"kelas": " 4A "},
    ]

    assert collect_unique_classes(students) == ["Semua", "5", "4A"]


def test_empty_roster_only_has_all_option():
    assert collect_unique_classes([]) == ["Semua"]


def test_normalize_class_label_absent_markers():
    assert normalize_class_label(None) is None
    assert normalize_class_label("") is None
    assert normalize_class_label("  ") is None
    assert normalize_class_label("null") is None
    assert normalize_class_label("undefined") is None
    assert normalize_class_label(7) == "7"
    assert normalize_class_label(" 2B ") == "2B"


def test_sort_class_labels_numeric_by_value():
    assert sort_class_labels(["12", "1", "B", "A", "02"]) == ["1", "02", "12", "A", "B"]
