from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import ClaimStatus
from .model import Claim


class ClaimRepository(Protocol):
    """Repository interface for Claim.

    Note (DIP): the service layer depends on this interface, not on the JSON file.
    """

    def list_all(self) -> Sequence[Claim]:
        raise NotImplementedError

    def list_for_lecturer(self, lecturer_id: str) -> Sequence[Claim]:
        raise NotImplementedError

    def get_by_id(self, claim_id: str) -> Optional[Claim]:
        raise NotImplementedError

    def add(self, claim: Claim) -> None:
        raise NotImplementedError

    def set_status(self, claim_id: str, status: ClaimStatus) -> Optional[Claim]:
        raise NotImplementedError

    def set_statuses(self, claim_ids: Iterable[str], status: ClaimStatus) -> Sequence[Claim]:
        """Update several claims with a single save."""

        raise NotImplementedError
