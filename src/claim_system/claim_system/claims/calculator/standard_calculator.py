from __future__ import annotations

from .base import ClaimCalculator


class StandardClaimCalculator(ClaimCalculator):
    """Standard rule: hours x rate, rounded to 2 decimals (half to even)."""

    def total(self, hours_worked: float, hourly_rate: float) -> float:
        return round(float(hours_worked) * float(hourly_rate), 2)
