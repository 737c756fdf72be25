from __future__ import annotations

from enum import Enum


class ClaimStatus(str, Enum):
    """Claim approval state, stored as-is in claims.json."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class Decision(str, Enum):
    """Manager decision on a claim."""

    APPROVE = "approve"
    REJECT = "reject"

    @property
    def status(self) -> ClaimStatus:
        return ClaimStatus.APPROVED if self is Decision.APPROVE else ClaimStatus.REJECTED


class PasswordScheme(str, Enum):
    SHA256 = "sha256"
    SALTED = "salted"
