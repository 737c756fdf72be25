from __future__ import annotations

import math
from typing import Union

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_non_negative_number(value: Union[str, int, float], field_name: str) -> float:
    """Parse a form value into a finite float >= 0."""
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValidationError(f"{field_name} is required")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")

    if not math.isfinite(number) or number < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    return number
