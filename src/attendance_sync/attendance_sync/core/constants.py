"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

KEY_ACTIVE_SESSION = "activeSession"
KEY_RECORDS = "records"

DEFAULT_KV_TIMEOUT_MS = 5000
DEFAULT_POLL_INTERVAL_MS = 3000
DEFAULT_DB_PATH = "db.json"
TMP_SUFFIX = ".tmp"

SESSION_ID_PREFIX = "session_"
CSV_EXPORT_FILENAME = "attendance_logs_weekly.csv"
