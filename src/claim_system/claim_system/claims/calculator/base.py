from __future__ import annotations

from abc import ABC, abstractmethod


class ClaimCalculator(ABC):
    """Calculator interface (Strategy Pattern for claim totals)."""

    @abstractmethod
    def total(self, hours_worked: float, hourly_rate: float) -> float:
        raise NotImplementedError
