from __future__ import annotations

import math
from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def clean_str(value: Any, default: str = "") -> str:
    """Trim a free-text field; None/blank falls back to default."""
    if value is None:
        return default
    value = str(value).strip()
    return value or default


def coerce_salary(value: Any) -> float:
    """Salary is always a finite, non-negative number (0 on invalid input)."""
    if isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def parse_optional_float(value: Optional[str], field_name: str) -> Optional[float]:
    if value is None or not str(value).strip():
        return None
    try:
        number = float(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a number")
    return number


def parse_positive_int(value: Optional[str], default: int) -> int:
    """Lenient int parsing for query strings: anything unusable gives default."""
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default
