from __future__ import annotations

from enum import Enum


class SyncAction(str, Enum):
    """Tên các thao tác ghi được chấp nhận bởi POST /api/sync."""

    SET_SESSION = "SET_SESSION"
    ADD_RECORD = "ADD_RECORD"
    DELETE_RECORD = "DELETE_RECORD"
    CLEAR_RECORDS = "CLEAR_RECORDS"
    CLEAR_SESSION = "CLEAR_SESSION"


class StoreMode(str, Enum):
    """Chế độ lưu trữ, chọn một lần khi khởi động."""

    DURABLE = "durable"
    LOCAL = "local"
