from __future__ import annotations

from typing import Union

from ..claims.repository import ClaimRepository
from ..core.enums import ClaimStatus
from ..core.exceptions import LecturerNotFoundError
from ..lecturers.repository import LecturerRepository
from .model import ApprovedClaimsReport, Invoice, InvoiceLine, NoClaims, NoResults


class ReportService:
    def __init__(self, claims: ClaimRepository, lecturers: LecturerRepository):
        self._claims = claims
        self._lecturers = lecturers

    def report_approved(self) -> Union[ApprovedClaimsReport, NoResults]:
        if not any(c.status == ClaimStatus.APPROVED for c in self._claims.list_all()):
            return NoResults()
        return ApprovedClaimsReport(self._claims.list_all)

    def invoice_for(self, lecturer_id: str) -> Union[Invoice, NoClaims]:
        lecturer = self._lecturers.get_by_id((lecturer_id or "").strip())
        if not lecturer:
            raise LecturerNotFoundError("Lecturer not found.")

        claims = self._claims.list_for_lecturer(lecturer.lecturer_id)
        if not claims:
            return NoClaims(lecturer=lecturer)

        return Invoice(
            lecturer=lecturer,
            lines=[
                InvoiceLine(
                    date_submitted=c.date_submitted,
                    notes=c.notes,
                    total_amount=c.total_amount,
                    status=c.status,
                )
                for c in claims
            ],
        )
