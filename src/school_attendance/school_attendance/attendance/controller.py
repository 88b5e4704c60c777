from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import normalize_history_date
from ..common.responses import handle, ok
from ..common.validators import require_non_empty
from ..container import Container
from ..core.constants import ALL_LABEL
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..recap.filters import RecordFilter


def register(app: Flask, container: Container) -> None:
    daily = container.daily_attendance_service
    history = container.history_service
    roster = container.roster_service

    def _body() -> dict:
        return request.get_json(silent=True) or {}

    def _status(value) -> AttendanceStatus:
        try:
            return AttendanceStatus.parse(value)
        except ValueError:
            raise ValidationError(f"Status tidak valid: {value}")

    @app.route("/api/attendance/daily", methods=["GET"], endpoint="attendance_daily_sheet")
    def attendance_daily_sheet():
        def run():
            date_iso = require_non_empty(request.args.get("tanggal"), "Tanggal")
            if not roster.students:
                roster.refresh()
            sheet = daily.sheet(date_iso, request.args.get("kelas", ALL_LABEL))
            return ok(
                {
                    "tanggal": sheet.date,
                    "kelas": sheet.class_label,
                    "rows": [r.to_dict() for r in sheet.rows],
                    "summary": sheet.summary.to_dict(),
                    "classes": roster.classes(),
                }
            )

        return handle(run)

    @app.route("/api/attendance/daily/mark", methods=["POST"], endpoint="attendance_daily_mark")
    def attendance_daily_mark():
        def run():
            data = _body()
            date_iso = require_non_empty(data.get("tanggal"), "Tanggal")
            student_id = require_non_empty(data.get("id"), "Siswa")
            daily.mark(date_iso, student_id, _status(data.get("status")))
            return ok()

        return handle(run)

    @app.route("/api/attendance/daily/submit", methods=["POST"], endpoint="attendance_daily_submit")
    def attendance_daily_submit():
        def run():
            data = _body()
            date_iso = require_non_empty(data.get("tanggal"), "Tanggal")
            entries = daily.submit(date_iso, data.get("kelas") or ALL_LABEL)
            return ok({"count": len(entries)}, "Data absensi berhasil dikirim")

        return handle(run)

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    def attendance_history():
        def run():
            history.refresh()
            if not roster.students:
                roster.refresh()
            record_filter = RecordFilter.from_inputs(
                class_label=request.args.get("kelas"),
                student_name=request.args.get("nama"),
                date=request.args.get("tanggal"),
            )
            return ok(
                {
                    "rows": [r.to_dict() for r in history.view(record_filter)],
                    "names": history.name_options(roster.students, record_filter.class_label),
                    "pending": len(history.buffer),
                }
            )

        return handle(run)

    @app.route("/api/attendance/history/status", methods=["POST"], endpoint="attendance_history_status")
    def attendance_history_status():
        def run():
            data = _body()
            date = normalize_history_date(require_non_empty(data.get("tanggal"), "Tanggal"))
            nisn = require_non_empty(data.get("nisn"), "NISN")
            records = history.set_status((date, nisn), _status(data.get("status")))
            return ok({"records": [r.to_payload() for r in records], "pending": len(history.buffer)})

        return handle(run)

    @app.route("/api/attendance/history/save", methods=["POST"], endpoint="attendance_history_save")
    def attendance_history_save():
        def run():
            result = history.save_changes()
            if not result.sent:
                return ok({"sent": False, "count": 0}, "Tidak ada perubahan untuk disimpan")
            return ok(
                {"sent": True, "count": result.update_count, "confirmed": result.confirmed},
                f"{result.update_count} perubahan berhasil dikirim",
            )

        return handle(run)

    @app.route("/api/attendance/history/discard", methods=["POST"], endpoint="attendance_history_discard")
    def attendance_history_discard():
        def run():
            dropped = history.discard_changes()
            return ok({"count": dropped}, "Perubahan dibatalkan")

        return handle(run)

    @app.route("/api/attendance/history", methods=["DELETE"], endpoint="attendance_history_delete_all")
    def attendance_history_delete_all():
        def run():
            history.delete_all()
            return ok(message="Permintaan hapus semua data absensi berhasil dikirim")

        return handle(run)
