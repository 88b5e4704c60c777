from __future__ import annotations

import io
from datetime import datetime

from flask import Flask, request, send_file

from ..common.responses import handle, ok
from ..container import Container
from ..core.constants import ALL_LABEL, NO_CLASS_LABEL
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    recap = container.recap_service
    exports = container.report_export_service
    roster = container.roster_service

    def _view(kind: str):
        class_label = request.args.get("kelas", ALL_LABEL)
        if kind == "monthly":
            return recap.monthly(class_label, request.args.get("bulan", "Oktober"))
        if kind == "semester":
            return recap.semester(class_label, request.args.get("semester", "1"))
        raise ValidationError(f"Jenis rekap tidak dikenal: {kind}")

    def _sign_date():
        value = (request.args.get("tanggal_ttd") or "").strip()
        if not value:
            return None
        try:
            return datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError:
            raise ValidationError("Tanggal tanda tangan tidak valid")

    @app.route("/api/recap/<kind>", methods=["GET"], endpoint="recap_view")
    def recap_view(kind: str):
        return handle(lambda: ok(_view(kind).to_dict()))

    @app.route("/api/recap/<kind>/export", methods=["GET"], endpoint="recap_export")
    def recap_export(kind: str):
        def run():
            view = _view(kind)
            exported = exports.export(
                view,
                request.args.get("format", "xlsx"),
                place_name=request.args.get("tempat"),
                sign_date=_sign_date(),
            )
            return send_file(
                io.BytesIO(exported.content),
                mimetype=exported.mimetype,
                as_attachment=True,
                download_name=exported.filename,
            )

        return handle(run)

    @app.route("/api/recap/graph", methods=["GET"], endpoint="recap_graph")
    def recap_graph():
        def run():
            if not roster.students:
                roster.refresh()
            visibility = {
                s.value: request.args.get(s.value.lower(), "1") not in ("0", "false")
                for s in AttendanceStatus
            }
            view = recap.graph(
                request.args.get("kelas", NO_CLASS_LABEL),
                request.args.get("semester", "2"),
                visibility,
                classes=roster.classes(),
            )
            return ok(view.to_dict())

        return handle(run)
