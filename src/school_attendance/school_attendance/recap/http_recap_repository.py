from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..core.constants import ALL_LABEL, NO_CLASS_LABEL
from ..core.enums import Semester
from ..gateway.connection import ApiClient
from ..gateway.envelope import unwrap, unwrap_list
from .model import RecapRow
from .repository import RecapRepository

logger = logging.getLogger(__name__)


def _class_param(class_label: str) -> str:
    return "" if class_label in (ALL_LABEL, NO_CLASS_LABEL) else class_label


class HttpRecapRepository(RecapRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def monthly(self, *, class_label: str, month: str) -> Sequence[RecapRow]:
        body = self._client.get_json("monthlyRecap", kelas=_class_param(class_label), bulan=month.lower())
        rows = [RecapRow.from_payload(r, period=month) for r in unwrap_list(body) if isinstance(r, dict)]
        logger.info("monthly recap %s/%s: %d row(s)", class_label, month, len(rows))
        return rows

    def semester(self, *, class_label: str, semester: Semester) -> Sequence[RecapRow]:
        sem = Semester(semester)
        body = self._client.get_json("semesterRecap", kelas=_class_param(class_label), semester=sem.value)
        period = f"Semester {sem.value}"
        rows = [RecapRow.from_payload(r, period=period) for r in unwrap_list(body) if isinstance(r, dict)]
        logger.info("semester recap %s/%s: %d row(s)", class_label, sem.value, len(rows))
        return rows

    def graph(self, *, class_label: str, semester: Semester) -> Mapping[str, Any]:
        body = self._client.get_json("graphData", kelas=_class_param(class_label), semester=Semester(semester).value)
        data = unwrap(body)
        return data if isinstance(data, dict) else {}
