from __future__ import annotations

from flask import Flask

from ..common.responses import handle, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    resets = container.data_reset_service

    @app.route("/api/data", methods=["DELETE"], endpoint="data_delete_everything")
    def data_delete_everything():
        def run():
            result = resets.delete_everything()
            return ok(
                {"verified": not result.used_fallback, "clearedKeys": result.cleared_keys},
                result.message,
            )

        return handle(run)
