from __future__ import annotations

import os
import time
from datetime import datetime, timezone

import pytest

os.environ.setdefault("APP_ENV", "testing")
os.environ.pop("ATTENDANCE_SETTINGS", None)

from src.attendance_sync.attendance_sync.core.exceptions import StoreUnavailableError
from src.attendance_sync.attendance_sync.sync.coordinator import StateCoordinator
from src.attendance_sync.attendance_sync.sync.file_store import JsonFileStore
from src.attendance_sync.attendance_sync.sync.timeout import BoundedCaller


class InMemoryKV:
    def __init__(self, data: dict | None = None):
        self.data = dict(data or {})
        self.set_calls: list[str] = []

    def get(self, key: str):
        return self.data.get(key)

    def set(self, key: str, value) -> None:
        self.set_calls.append(key)
        self.data[key] = value


class DownKV:
    """Every call fails like an unreachable Redis."""

    def get(self, key: str):
        raise StoreUnavailableError("connection refused")

    def set(self, key: str, value) -> None:
        raise StoreUnavailableError("connection refused")


class SlowKV(InMemoryKV):
    def __init__(self, delay_s: float, data: dict | None = None):
        super().__init__(data)
        self.delay_s = delay_s

    def get(self, key: str):
        time.sleep(self.delay_s)
        return super().get(key)

    def set(self, key: str, value) -> None:
        time.sleep(self.delay_s)
        super().set(key, value)


@pytest.fixture
def fixed_now() -> datetime:
    # Monday, ISO week 6
    return datetime(2026, 2, 2, 8, 30, tzinfo=timezone.utc)


@pytest.fixture
def file_store(tmp_path) -> JsonFileStore:
    return JsonFileStore(tmp_path / "db.json")


@pytest.fixture
def kv_factory():
    kinds = {"memory": InMemoryKV, "down": DownKV, "slow": SlowKV}

    def make(kind: str, *args, **kwargs):
        return kinds[kind](*args, **kwargs)

    return make


@pytest.fixture
def make_coordinator(file_store):
    callers: list[BoundedCaller] = []

    def make(durable=None, *, timeout_ms: int = 200) -> StateCoordinator:
        caller = BoundedCaller(timeout_ms)
        callers.append(caller)
        return StateCoordinator(durable=durable, fallback=file_store, caller=caller)

    yield make
    for caller in callers:
        caller.shutdown()
