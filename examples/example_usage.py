"""Contoh: memakai service layer tanpa Flask.

Controller hanya lapisan tipis, aturan bisnis ada di service.
"""

import importlib

from config import get_settings_module

from src.school_attendance.school_attendance.container import build_container
from src.school_attendance.school_attendance.gateway.connection import ApiConfig


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        api_config=ApiConfig(endpoint=settings.API_ENDPOINT, timeout=settings.REQUEST_TIMEOUT),
        store_path=settings.LOCAL_STORE_PATH,
    )
    view = container.recap_service.monthly("Semua", "Oktober")
    print(view.title)
    for row in view.table:
        print(row)
    if view.error:
        print(view.error)


if __name__ == "__main__":
    main()
