"""Ví dụ: dùng service layer (không qua Flask).

Controllers chỉ là lớp mỏng, nghiệp vụ nằm ở Services.
"""

import importlib

from config import get_settings_module

from src.attendance_sync.attendance_sync.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(store_config=settings.STORE_CONFIG, admin_password=settings.ADMIN_PASSWORD)

    session = container.session_service.start("Demo session")
    result = container.record_service.check_in(
        student_name="Demo Student",
        student_id="demo-001",
        session_id=session.id,
        session_name=session.name,
    )
    print("added:", result.added)
    print(container.record_service.grouped_by_day())


if __name__ == "__main__":
    main()
