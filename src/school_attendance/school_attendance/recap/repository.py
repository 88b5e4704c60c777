from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from ..core.enums import Semester
from .model import RecapRow


class RecapRepository(Protocol):
    def monthly(self, *, class_label: str, month: str) -> Sequence[RecapRow]:
        raise NotImplementedError

    def semester(self, *, class_label: str, semester: Semester) -> Sequence[RecapRow]:
        raise NotImplementedError

    def graph(self, *, class_label: str, semester: Semester) -> Mapping[str, Any]:
        raise NotImplementedError
