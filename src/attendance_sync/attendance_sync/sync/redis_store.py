from __future__ import annotations

import json
from typing import Any

import redis

from ..core.exceptions import StoreReadError, StoreUnavailableError
from .repository import DurableStore


class RedisDurableStore(DurableStore):
    """Durable store backed by Redis (Vercel KV / Upstash expose a redis:// URL).

    Values are stored as JSON strings so other clients of the same keys can read them.
    """

    def __init__(self, client: "redis.Redis"):
        self._client = client

    @classmethod
    def from_url(cls, url: str, *, timeout_ms: int) -> "RedisDurableStore":
        # Socket timeouts let abandoned calls finish on their own after the bounded wrapper gives up.
        seconds = max(timeout_ms, 1) / 1000
        client = redis.Redis.from_url(url, socket_timeout=seconds, socket_connect_timeout=seconds)
        return cls(client)

    def get(self, key: str) -> Any:
        try:
            raw = self._client.get(key)
        except (redis.exceptions.RedisError, OSError) as e:
            raise StoreUnavailableError(f"GET {key} failed: {e}") from e
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            raise StoreReadError(f"GET {key} returned non-JSON data") from e

    def set(self, key: str, value: Any) -> None:
        try:
            self._client.set(key, json.dumps(value))
        except (redis.exceptions.RedisError, OSError) as e:
            raise StoreUnavailableError(f"SET {key} failed: {e}") from e
