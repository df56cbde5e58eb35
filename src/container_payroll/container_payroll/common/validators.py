from __future__ import annotations

from datetime import date
from typing import Any, Sequence

from ..core.constants import TEAM_SIZE
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_iso_date(value: Any, field_name: str) -> date:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")


def require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a whole number")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")
    if isinstance(value, float) and value != number:
        raise ValidationError(f"{field_name} must be a whole number")
    if number <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return number


def require_worker_pair(value: Any) -> tuple[str, str]:
    if not isinstance(value, Sequence) or isinstance(value, str) or len(value) != TEAM_SIZE:
        raise ValidationError(f"A team needs exactly {TEAM_SIZE} workers")
    first = require_non_empty(value[0], "Worker")
    second = require_non_empty(value[1], "Worker")
    if first == second:
        raise ValidationError("A worker cannot be paired with themselves")
    return first, second
