from __future__ import annotations

from typing import Any, Mapping

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must be a non-empty string")
    return value.strip()


def require_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value


def require_mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValidationError(f"{field_name} must be an object")
    return value


def require_text(value: Any, field_name: str) -> str:
    """Like require_string, but numbers (as older clients stored them) become text."""
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a string")
    if isinstance(value, (int, float)):
        return str(value)
    return require_string(value, field_name)
