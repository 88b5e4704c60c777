from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_non_empty
from ..core.exceptions import RemoteApiError, RemoteTransportError, ValidationError
from .model import SchoolInfo
from .repository import SchoolRepository
from .signature import decode_signature

logger = logging.getLogger(__name__)


class SchoolService:
    def __init__(self, school: SchoolRepository):
        self._school = school

    def get(self) -> Optional[SchoolInfo]:
        try:
            return self._school.get()
        except RemoteApiError:
            return None

    def get_for_report(self) -> Optional[SchoolInfo]:
        """Like ``get`` but never fails: a report without signatures is still a report."""
        try:
            return self.get()
        except RemoteTransportError as e:
            logger.warning("school data unavailable for report: %s", e)
            return None

    def save(
        self,
        *,
        principal_name: str,
        principal_nip: str,
        teacher_name: str,
        teacher_nip: str,
        principal_signature: str = "",
        teacher_signature: str = "",
    ) -> SchoolInfo:
        try:
            info = SchoolInfo(
                principal_name=require_non_empty(principal_name, "Nama kepala sekolah"),
                principal_nip=require_non_empty(principal_nip, "NIP kepala sekolah"),
                teacher_name=require_non_empty(teacher_name, "Nama guru"),
                teacher_nip=require_non_empty(teacher_nip, "NIP guru"),
                principal_signature=(principal_signature or "").strip(),
                teacher_signature=(teacher_signature or "").strip(),
            )
        except ValidationError:
            raise ValidationError("Semua field wajib diisi kecuali tanda tangan!")

        for label, sig in (("kepala sekolah", info.principal_signature), ("guru", info.teacher_signature)):
            if sig and decode_signature(sig) is None:
                raise ValidationError(f"Tanda tangan {label} bukan gambar yang valid")

        self._school.save(info)
        logger.info("school data sent")
        return info
