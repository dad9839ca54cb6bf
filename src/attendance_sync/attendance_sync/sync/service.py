from __future__ import annotations

from typing import Any

from ..core.enums import StoreMode
from .actions import Action, parse_action
from .coordinator import StateCoordinator
from .model import Database
from .router import MutationRouter


class SyncService:
    """Use case: read the shared state, or apply one write action to it.

    Every call loads a fresh snapshot; nothing is cached between requests, so
    concurrent writers race and the last save wins.
    """

    def __init__(self, coordinator: StateCoordinator, router: MutationRouter | None = None):
        self._coordinator = coordinator
        self._router = router or MutationRouter()

    @property
    def mode(self) -> StoreMode:
        return self._coordinator.mode

    def snapshot(self) -> Database:
        return self._coordinator.load()

    def dispatch(self, body: Any) -> Database:
        # Parse before touching storage so a bad request never triggers a save.
        return self.apply(parse_action(body))

    def apply(self, action: Action) -> Database:
        db = self._coordinator.load()
        updated = self._router.apply(action, db)
        self._coordinator.save(updated)
        return updated

    def store_check(self) -> dict:
        if self.mode is StoreMode.LOCAL:
            return {"ok": True, "mode": self.mode.value, "result": None}
        check = self._coordinator.read_durable_records()
        if check.ok:
            return {"ok": True, "mode": self.mode.value, "result": check.value}
        return {"ok": False, "mode": self.mode.value, "error": str(check.error)}
