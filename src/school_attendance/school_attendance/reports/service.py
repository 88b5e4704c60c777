from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import export_timestamp, now_local
from ..core.constants import DEFAULT_PLACE_NAME
from ..recap.service import RecapView
from ..school.service import SchoolService
from .factory import ExporterFactory
from .model import ExportedFile, ReportDocument

logger = logging.getLogger(__name__)


class ReportExportService:
    def __init__(
        self,
        school: SchoolService,
        *,
        factory: Optional[ExporterFactory] = None,
        default_place_name: str = DEFAULT_PLACE_NAME,
    ):
        self._school = school
        self._factory = factory or ExporterFactory()
        self._default_place_name = default_place_name

    def export(
        self,
        view: RecapView,
        fmt: str,
        *,
        place_name: Optional[str] = None,
        sign_date: Optional[date] = None,
        now: Optional[datetime] = None,
    ) -> ExportedFile:
        exporter = self._factory.for_format(fmt)
        now = now or now_local()
        document = ReportDocument(
            title=view.title,
            sheet_name=view.sheet_name,
            table=view.table,
            school=self._school.get_for_report(),
            place_name=(place_name or "").strip() or self._default_place_name,
            sign_date=sign_date or now.date(),
        )
        content = exporter.render(document)
        filename = f"{view.file_stem}_{export_timestamp(now)}.{exporter.extension}"
        logger.info("exported %s (%d bytes, %d row(s))", filename, len(content), document.body_rows)
        return ExportedFile(filename=filename, mimetype=exporter.mimetype, content=content)
