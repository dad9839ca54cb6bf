from __future__ import annotations

from concurrent.futures import Executor, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Callable, Optional, TypeVar

from ..core.exceptions import StoreTimeoutError

T = TypeVar("T")


class BoundedCaller:
    """Race a call against a fixed timeout.

    On timeout the call is abandoned, not cancelled: it may still finish in its
    worker thread, but the result is discarded.
    """

    def __init__(self, timeout_ms: int, executor: Optional[Executor] = None):
        self._timeout_ms = int(timeout_ms)
        self._executor = executor or ThreadPoolExecutor(max_workers=8, thread_name_prefix="kv-call")

    @property
    def timeout_ms(self) -> int:
        return self._timeout_ms

    def call(self, fn: Callable[[], T]) -> T:
        future = self._executor.submit(fn)
        try:
            return future.result(timeout=self._timeout_ms / 1000)
        except FutureTimeoutError:
            future.cancel()
            raise StoreTimeoutError(f"KV_TIMEOUT after {self._timeout_ms} ms") from None

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False)
