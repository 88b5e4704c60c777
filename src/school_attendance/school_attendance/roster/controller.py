from __future__ import annotations

from flask import Flask, request

from ..common.responses import handle, ok
from ..container import Container
from ..core.constants import ALL_LABEL


def register(app: Flask, container: Container) -> None:
    roster = container.roster_service

    def _body() -> dict:
        return request.get_json(silent=True) or {}

    @app.route("/api/students", methods=["GET"], endpoint="students_list")
    def students_list():
        def run():
            roster.refresh()
            class_label = request.args.get("kelas", ALL_LABEL)
            students = roster.search(request.args.get("q", ""), class_label)
            return ok({"students": [s.to_payload() for s in students], "classes": roster.classes()})

        return handle(run)

    @app.route("/api/students", methods=["POST"], endpoint="students_add")
    def students_add():
        def run():
            data = _body()
            student = roster.add_student(nisn=data.get("nisn", ""), name=data.get("nama", ""), class_label=data.get("kelas", ""))
            return ok({"nisn": student.nisn}, "Data siswa berhasil dikirim", 201)

        return handle(run)

    @app.route("/api/students/bulk", methods=["POST"], endpoint="students_bulk_add")
    def students_bulk_add():
        def run():
            data = _body()
            students = roster.bulk_add(
                nisn_block=data.get("nisn", ""),
                name_block=data.get("nama", ""),
                class_block=data.get("kelas", ""),
            )
            return ok({"count": len(students)}, f"{len(students)} data siswa berhasil dikirim", 201)

        return handle(run)

    @app.route("/api/students/<nisn>", methods=["PUT"], endpoint="students_edit")
    def students_edit(nisn: str):
        def run():
            data = _body()
            student = roster.edit_student(
                old_nisn=nisn,
                nisn=data.get("nisn", ""),
                name=data.get("nama", ""),
                class_label=data.get("kelas", ""),
            )
            return ok({"nisn": student.nisn}, "Perubahan data siswa berhasil dikirim")

        return handle(run)

    @app.route("/api/students/<nisn>", methods=["DELETE"], endpoint="students_delete")
    def students_delete(nisn: str):
        def run():
            roster.delete_student(nisn)
            return ok(message="Permintaan hapus siswa berhasil dikirim")

        return handle(run)
