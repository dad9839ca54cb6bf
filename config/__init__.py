import os


def get_settings_module() -> str:
    # ATTENDANCE_SETTINGS trỏ thẳng tới một module cấu hình (vd. khi deploy)
    explicit = os.getenv("ATTENDANCE_SETTINGS")
    if explicit:
        return explicit

    # Nếu không, APP_ENV chọn module, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()
    if env in {"prod", "production"}:
        return "config.production"
    if env in {"test", "testing"}:
        return "config.testing"
    return "config.development"
