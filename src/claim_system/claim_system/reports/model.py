from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

from ..claims.model import Claim
from ..core.enums import ClaimStatus
from ..lecturers.model import Lecturer


@dataclass(frozen=True)
class ApprovedLine:
    date_submitted: str
    lecturer_name: str
    lecturer_id: str
    total_amount: float


@dataclass(frozen=True)
class InvoiceLine:
    date_submitted: str
    notes: str
    total_amount: float
    status: ClaimStatus


class ApprovedClaimsReport:
    """Read-model for HR: approved claims in collection order.

    Iterating re-reads the source each time, so the report can be walked
    again after further decisions.
    """

    def __init__(self, source: Callable[[], Sequence[Claim]]):
        self._source = source

    def __iter__(self) -> Iterator[ApprovedLine]:
        for c in self._source():
            if c.status == ClaimStatus.APPROVED:
                yield ApprovedLine(
                    date_submitted=c.date_submitted,
                    lecturer_name=c.lecturer_name,
                    lecturer_id=c.lecturer_id,
                    total_amount=c.total_amount,
                )


@dataclass(frozen=True)
class Invoice:
    lecturer: Lecturer
    lines: list[InvoiceLine]

    @property
    def total(self) -> float:
        return round(sum(line.total_amount for line in self.lines), 2)


@dataclass(frozen=True)
class NoResults:
    message: str = "No approved claims to display."


@dataclass(frozen=True)
class NoClaims:
    lecturer: Lecturer
    message: str = "No claims found for this lecturer."
