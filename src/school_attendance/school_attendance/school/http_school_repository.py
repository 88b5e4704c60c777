from __future__ import annotations

from typing import Optional

from ..gateway.connection import ApiClient
from ..gateway.envelope import first_or_none, unwrap_list
from .model import SchoolInfo
from .repository import SchoolRepository


class HttpSchoolRepository(SchoolRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def get(self) -> Optional[SchoolInfo]:
        raw = first_or_none(unwrap_list(self._client.get_json("schoolData")))
        return SchoolInfo.from_payload(raw) if isinstance(raw, dict) else None

    def save(self, info: SchoolInfo) -> None:
        self._client.post_discarding_response({"type": "schoolData", **info.to_payload()})
