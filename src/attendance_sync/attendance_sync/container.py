from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .admin.service import AdminAuthService
from .common.datetime_utils import resolve_tz
from .core.constants import DEFAULT_DB_PATH, DEFAULT_KV_TIMEOUT_MS
from .records.service import RecordService
from .sessions.service import SessionService
from .sync.coordinator import StateCoordinator
from .sync.file_store import JsonFileStore
from .sync.redis_store import RedisDurableStore
from .sync.repository import DurableStore
from .sync.router import MutationRouter
from .sync.service import SyncService
from .sync.timeout import BoundedCaller


@dataclass(frozen=True)
class Container:
    durable_store: Optional[DurableStore]
    file_store: JsonFileStore
    coordinator: StateCoordinator

    sync_service: SyncService
    session_service: SessionService
    record_service: RecordService
    admin_auth_service: AdminAuthService


def build_container(
    *,
    store_config: dict,
    admin_password: str,
    durable_store: Optional[DurableStore] = None,
    export_tz: Optional[str] = None,
) -> Container:
    """Wire stores into services.

    The durable store is used only when `kv_url` is set (or one is passed in);
    otherwise everything runs against the local file. `export_tz` names the zone
    for exported times; unset means the server's local zone.
    """

    timeout_ms = int(store_config.get("kv_timeout_ms") or DEFAULT_KV_TIMEOUT_MS)
    kv_url = store_config.get("kv_url")
    if durable_store is None and kv_url:
        durable_store = RedisDurableStore.from_url(str(kv_url), timeout_ms=timeout_ms)

    file_store = JsonFileStore(Path(store_config.get("db_path") or DEFAULT_DB_PATH))
    coordinator = StateCoordinator(
        durable=durable_store,
        fallback=file_store,
        caller=BoundedCaller(timeout_ms),
    )

    sync_service = SyncService(coordinator, MutationRouter())
    session_service = SessionService(sync_service)
    record_service = RecordService(sync_service, tz=resolve_tz(export_tz))
    admin_auth_service = AdminAuthService(str(admin_password))

    return Container(
        durable_store=durable_store,
        file_store=file_store,
        coordinator=coordinator,
        sync_service=sync_service,
        session_service=session_service,
        record_service=record_service,
        admin_auth_service=admin_auth_service,
    )
