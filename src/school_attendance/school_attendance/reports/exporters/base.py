from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import ReportDocument


class ReportExporter(ABC):
    """Strategy interface: turn a ReportDocument into file bytes."""

    extension: str = ""
    mimetype: str = "application/octet-stream"

    @abstractmethod
    def render(self, document: ReportDocument) -> bytes:
        raise NotImplementedError
