import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORE_CONFIG = {
    "kv_url": os.getenv("KV_URL") or None,
    "kv_timeout_ms": int(os.getenv("KV_TIMEOUT_MS", "5000")),
    "db_path": os.getenv("DB_PATH", "db.json"),
}

ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

POLL_INTERVAL_MS = int(os.getenv("POLL_INTERVAL_MS", "3000"))

PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL") or None

EXPORT_TZ = os.getenv("EXPORT_TZ") or None

DEBUG = False
