from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Attempt(Generic[T]):
    """Outcome of one try against one backend: either a value or the error it raised."""

    source: str
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def attempt(source: str, fn: Callable[[], T], *, catch: tuple[type[Exception], ...] = (Exception,)) -> Attempt[T]:
    try:
        return Attempt(source=source, value=fn())
    except catch as e:
        return Attempt(source=source, error=e)
