import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# KV_URL set -> Redis is the primary store; unset -> local file only.
STORE_CONFIG = {
    "kv_url": os.getenv("KV_URL") or None,
    "kv_timeout_ms": int(os.getenv("KV_TIMEOUT_MS", "5000")),
    "db_path": os.getenv("DB_PATH", "db.json"),
}

# Static admin unlock for the dashboard
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

POLL_INTERVAL_MS = int(os.getenv("POLL_INTERVAL_MS", "3000"))

# Base of the student join link encoded in the QR code; request host when unset
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL") or None

# IANA zone for CSV week/time columns and check-in weekday; server local time when unset
EXPORT_TZ = os.getenv("EXPORT_TZ") or None

DEBUG = True
