from __future__ import annotations

from flask import Flask, request

from ..common.responses import handle, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    school = container.school_service

    @app.route("/api/school", methods=["GET"], endpoint="school_get")
    def school_get():
        def run():
            info = school.get()
            return ok(info.to_payload() if info else None)

        return handle(run)

    @app.route("/api/school", methods=["POST"], endpoint="school_save")
    def school_save():
        def run():
            data = request.get_json(silent=True) or {}
            school.save(
                principal_name=data.get("namaKepsek", ""),
                principal_nip=data.get("nipKepsek", ""),
                teacher_name=data.get("namaGuru", ""),
                teacher_nip=data.get("nipGuru", ""),
                principal_signature=data.get("ttdKepsek", ""),
                teacher_signature=data.get("ttdGuru", ""),
            )
            return ok(message="Data sekolah berhasil dikirim")

        return handle(run)
