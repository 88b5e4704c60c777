from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from .attendance.edit_buffer import AttendanceEditBuffer
from .attendance.history_service import HistoryService
from .attendance.http_attendance_repository import HttpAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import DailyAttendanceService
from .core.constants import DEFAULT_PLACE_NAME
from .core.enums import AttendanceStatus
from .core.events import EventBus
from .gateway.connection import ApiClient, ApiConfig
from .maintenance.service import DataResetService
from .recap.http_recap_repository import HttpRecapRepository
from .recap.repository import RecapRepository
from .recap.service import RecapService
from .reports.service import ReportExportService
from .roster.http_roster_repository import HttpRosterRepository
from .roster.repository import RosterRepository
from .roster.service import RosterService
from .school.http_school_repository import HttpSchoolRepository
from .school.repository import SchoolRepository
from .school.service import SchoolService
from .storage.local_store import LocalStore


@dataclass(frozen=True)
class Container:
    client: ApiClient
    events: EventBus
    store: LocalStore

    roster_repo: RosterRepository
    attendance_repo: AttendanceRepository
    recap_repo: RecapRepository
    school_repo: SchoolRepository

    roster_service: RosterService
    daily_attendance_service: DailyAttendanceService
    history_service: HistoryService
    recap_service: RecapService
    school_service: SchoolService
    report_export_service: ReportExportService
    data_reset_service: DataResetService


def build_container(
    *,
    api_config: ApiConfig,
    store_path: str,
    unmarked_default: Optional[AttendanceStatus] = AttendanceStatus.HADIR,
    place_name: str = DEFAULT_PLACE_NAME,
    session: Optional[requests.Session] = None,
    roster_repo: Optional[RosterRepository] = None,
    attendance_repo: Optional[AttendanceRepository] = None,
    recap_repo: Optional[RecapRepository] = None,
    school_repo: Optional[SchoolRepository] = None,
) -> Container:
    """Wire gateway, repositories and services.

    Repositories can be passed in to run the app against in-memory fakes.
    """

    client = ApiClient(api_config, session=session)
    events = EventBus()
    store = LocalStore(store_path)

    roster_repo = roster_repo or HttpRosterRepository(client)
    attendance_repo = attendance_repo or HttpAttendanceRepository(client)
    recap_repo = recap_repo or HttpRecapRepository(client)
    school_repo = school_repo or HttpSchoolRepository(client)

    roster_service = RosterService(roster_repo, store=store, events=events)
    daily_attendance_service = DailyAttendanceService(attendance_repo, roster_service, unmarked_default=unmarked_default)
    history_service = HistoryService(attendance_repo, buffer=AttendanceEditBuffer(), events=events)
    recap_service = RecapService(recap_repo)
    school_service = SchoolService(school_repo)
    report_export_service = ReportExportService(school_service, default_place_name=place_name)
    data_reset_service = DataResetService(client, store, events)

    return Container(
        client=client,
        events=events,
        store=store,
        roster_repo=roster_repo,
        attendance_repo=attendance_repo,
        recap_repo=recap_repo,
        school_repo=school_repo,
        roster_service=roster_service,
        daily_attendance_service=daily_attendance_service,
        history_service=history_service,
        recap_service=recap_service,
        school_service=school_service,
        report_export_service=report_export_service,
        data_reset_service=data_reset_service,
    )
