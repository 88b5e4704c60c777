from __future__ import annotations

import base64
import io

import pytest
from PIL import Image

from src.school_attendance.school_attendance.core.exceptions import RemoteApiError, ValidationError
from src.school_attendance.school_attendance.school.service import SchoolService
from src.school_attendance.school_attendance.school.signature import decode_signature, signature_png_bytes


def _png_data_url() -> str:
    bio = io.BytesIO()
    Image.new("RGB", (4, 2), "white").save(bio, format="PNG")
    return "data:image/png;base64," + base64.b64encode(bio.getvalue()).decode("ascii")


class InMemorySchool:
    def __init__(self, info=None, error=None):
        self.info = info
        self.error = error
        self.saved = []

    def get(self):
        if self.error:
            raise self.error
        return self.info

    def save(self, info):
        self.saved.append(info)


def test_save_requires_names_and_nips_but_not_signatures():
    repo = InMemorySchool()
    service = SchoolService(repo)

    with pytest.raises(ValidationError, match="kecuali tanda tangan"):
        service.save(principal_name="Rahma", principal_nip="", teacher_name="Sari", teacher_nip="1985")

    info = service.save(principal_name="Rahma", principal_nip="1970", teacher_name="Sari", teacher_nip="1985")
    assert repo.saved == [info]


def test_save_rejects_undecodable_signature():
    service = SchoolService(InMemorySchool())

    with pytest.raises(ValidationError):
        service.save(
            principal_name="Rahma",
            principal_nip="1970",
            teacher_name="Sari",
            teacher_nip="1985",
            teacher_signature="data:image/png;base64,bm90LWFuLWltYWdl",
        )


def test_missing_school_data_is_none():
    assert SchoolService(InMemorySchool(error=RemoteApiError("kosong"))).get() is None


def test_signature_decodes_to_rgba():
    image = decode_signature(_png_data_url())

    assert image.mode == "RGBA"
    assert image.size == (4, 2)
    assert signature_png_bytes(_png_data_url()).startswith(b"\x89PNG")
    assert decode_signature("") is None
