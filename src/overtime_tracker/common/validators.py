from __future__ import annotations

from ..core.constants import MAX_MINUTES
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} cannot be empty")
    return value.strip()


def require_within_minutes_limit(value: int, field_name: str) -> int:
    if value > MAX_MINUTES:
        raise ValidationError(f"{field_name} is too large (limit is {MAX_MINUTES} minutes)")
    return value
