from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..core.constants import DEFAULT_MIN_CLAIM_TOTAL
from ..core.enums import ClaimStatus
from .model import Claim


class AdjudicationRule(ABC):
    """Automatic decision applied at submission and again on lecturer login."""

    @abstractmethod
    def initial_status(self, total_amount: float) -> ClaimStatus:
        raise NotImplementedError

    @abstractmethod
    def reevaluate(self, claim: Claim) -> Optional[ClaimStatus]:
        """Return the new status, or None when the claim stays as it is."""

        raise NotImplementedError


class MinimumTotalRule(AdjudicationRule):
    """Claims totalling less than the threshold are rejected without review."""

    def __init__(self, threshold: float = DEFAULT_MIN_CLAIM_TOTAL):
        self.threshold = float(threshold)

    def is_below_threshold(self, total_amount: float) -> bool:
        return total_amount < self.threshold

    def initial_status(self, total_amount: float) -> ClaimStatus:
        if self.is_below_threshold(total_amount):
            return ClaimStatus.REJECTED
        return ClaimStatus.PENDING

    def reevaluate(self, claim: Claim) -> Optional[ClaimStatus]:
        # Only pending claims are touched; a manager's approval always stands.
        if claim.status == ClaimStatus.PENDING and self.is_below_threshold(claim.total_amount):
            return ClaimStatus.REJECTED
        return None
