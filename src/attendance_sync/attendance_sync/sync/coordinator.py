from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.result import Attempt, attempt
from ..core.constants import KEY_ACTIVE_SESSION, KEY_RECORDS
from ..core.enums import StoreMode
from ..core.exceptions import ReliabilityError, StoreError, StoreReadError, StoreTimeoutError, StoreUnavailableError, ValidationError
from .model import Database
from .repository import DurableStore, FallbackStore
from .timeout import BoundedCaller

logger = logging.getLogger(__name__)

# Errors that make one backend attempt fail without ending the request.
_RECOVERABLE = (StoreError, ValidationError)

# Only these hand a read over to the local file. Bad data from a reachable
# store must not: an empty fallback would be saved back over it.
_FALLBACK_TRIGGERS = (StoreUnavailableError, StoreTimeoutError)


class StateCoordinator:
    """Sole reader/writer of the persisted Database.

    The durable store is primary when configured; the local file takes over when
    it fails or times out. Mode is fixed at construction.
    """

    def __init__(self, *, durable: Optional[DurableStore], fallback: FallbackStore, caller: BoundedCaller):
        self._durable = durable
        self._fallback = fallback
        self._caller = caller

    @property
    def mode(self) -> StoreMode:
        return StoreMode.DURABLE if self._durable is not None else StoreMode.LOCAL

    # ----- attempts -----

    def try_durable_load(self) -> Attempt[Database]:
        durable = self._durable
        if durable is None:
            return Attempt(source="durable", error=StoreUnavailableError("Durable store not configured"))

        def _read() -> Database:
            active_session = durable.get(KEY_ACTIVE_SESSION)
            records = durable.get(KEY_RECORDS)
            return Database.from_parts(active_session, records)

        return attempt("durable", lambda: self._caller.call(_read), catch=_RECOVERABLE)

    def try_local_load(self) -> Attempt[Database]:
        def _read() -> Database:
            doc = self._fallback.read()
            if doc is None:
                return Database.empty()
            try:
                return Database.from_dict(doc)
            except ValidationError as e:
                raise StoreReadError(f"Invalid document in {self._fallback.path}: {e}") from e

        return attempt("local", _read, catch=_RECOVERABLE)

    def try_durable_save(self, doc: dict) -> Attempt[None]:
        durable = self._durable
        if durable is None:
            return Attempt(source="durable", error=StoreUnavailableError("Durable store not configured"))

        def _write() -> None:
            durable.set(KEY_ACTIVE_SESSION, doc[KEY_ACTIVE_SESSION])
            durable.set(KEY_RECORDS, doc[KEY_RECORDS])

        return attempt("durable", lambda: self._caller.call(_write), catch=_RECOVERABLE)

    def read_durable_records(self) -> Attempt[Any]:
        """Read the records key straight from the durable store, no fallback."""
        durable = self._durable
        if durable is None:
            return Attempt(source="durable", error=StoreUnavailableError("Durable store not configured"))
        return attempt("durable", lambda: self._caller.call(lambda: durable.get(KEY_RECORDS)), catch=_RECOVERABLE)

    # ----- policy -----

    def load(self) -> Database:
        if self._durable is not None:
            primary = self.try_durable_load()
            if primary.ok:
                return primary.unwrap()
            if not isinstance(primary.error, _FALLBACK_TRIGGERS):
                logger.error("Durable store returned unreadable state: %s", primary.error)
                raise ReliabilityError(
                    "RELIABILITY_FAILURE: Durable store holds data that cannot be loaded."
                ) from primary.error
            logger.warning("Durable store read failed (%s); falling back to %s", primary.error, self._fallback.path)

        local = self.try_local_load()
        if local.ok:
            return local.unwrap()

        logger.error("Local state read failed: %s", local.error)
        raise ReliabilityError("RELIABILITY_FAILURE: Could not load data from any source.") from local.error

    def save(self, db: Database) -> None:
        doc = db.to_dict()
        if self._durable is not None:
            primary = self.try_durable_save(doc)
            if primary.ok:
                return
            logger.warning("Durable store write failed (%s); writing %s instead", primary.error, self._fallback.path)

        self._fallback.write(doc)
