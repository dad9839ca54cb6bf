from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Protocol


class DurableStore(Protocol):
    """Remote key-value store. Each call is a single round-trip; no cross-key transaction."""

    def get(self, key: str) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError


class FallbackStore(Protocol):
    """Whole-document store on local disk."""

    @property
    def path(self) -> Path:
        raise NotImplementedError

    def read(self) -> Optional[dict]:
        raise NotImplementedError

    def write(self, doc: dict) -> None:
        raise NotImplementedError
