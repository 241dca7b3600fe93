from __future__ import annotations

import math

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if not isinstance(value, str) or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_finite_number(value, field_name: str) -> float:
    # bool is an int subclass; a JSON true is not a mark.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field_name} must be a number")
    number = float(value)
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number")
    return number


def require_int_id(value, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} is not a valid id")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is not a valid id")
