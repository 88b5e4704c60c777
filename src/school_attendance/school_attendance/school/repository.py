from __future__ import annotations

from typing import Optional, Protocol

from .model import SchoolInfo


class SchoolRepository(Protocol):
    def get(self) -> Optional[SchoolInfo]:
        raise NotImplementedError

    def save(self, info: SchoolInfo) -> None:
        raise NotImplementedError
