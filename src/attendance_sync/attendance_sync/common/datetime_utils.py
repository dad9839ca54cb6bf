from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def to_iso(value: datetime) -> str:
    """Format as ISO-8601 with millisecond precision and a trailing Z."""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_iso(value: str) -> datetime:
    """Parse an ISO-8601 instant, accepting the trailing Z form. Naive values are taken as UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def try_parse_iso(value: str) -> Optional[datetime]:
    try:
        return parse_iso(value)
    except (TypeError, ValueError):
        return None


def resolve_tz(name: Optional[str]) -> Optional[tzinfo]:
    """Zone for displayed times. None means the server's local zone."""
    if not name:
        return None
    if name.upper() in ("UTC", "Z"):
        return timezone.utc
    return ZoneInfo(name)


def weekday_name(value: datetime) -> str:
    """English weekday name, independent of the process locale."""
    return ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")[value.weekday()]


def epoch_millis(value: datetime) -> int:
    return int(value.timestamp() * 1000)
