import os

SECRET_KEY = "test-secret"

# Tests never talk to a real Redis unless they inject one.
STORE_CONFIG = {
    "kv_url": None,
    "kv_timeout_ms": 200,
    "db_path": os.getenv("DB_PATH", "test-db.json"),
}

ADMIN_PASSWORD = "admin123"

POLL_INTERVAL_MS = 3000

PUBLIC_BASE_URL = "http://testserver"

EXPORT_TZ = "UTC"

DEBUG = False
TESTING = True
