from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.enums import ClaimStatus
from ..storage.json_store import read_field


@dataclass(frozen=True)
class Claim:
    """Domain entity: a lecturer's claim for hours worked.

    Lecturer fields are a snapshot taken at submission time, not a link to the
    Lecturer record, so later profile edits never rewrite historical claims.
    """

    claim_id: str
    lecturer_name: str
    lecturer_id: str
    lecturer_email: str
    hours_worked: float
    hourly_rate: float
    total_amount: float
    notes: str
    status: ClaimStatus
    date_submitted: str
    stored_file_path: Optional[str] = None
    original_file_name: Optional[str] = None

    @property
    def has_file(self) -> bool:
        return bool(self.stored_file_path) and os.path.isfile(self.stored_file_path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.claim_id,
            "lecturerName": self.lecturer_name,
            "lecturerId": self.lecturer_id,
            "lecturerEmail": self.lecturer_email,
            "hoursWorked": self.hours_worked,
            "hourlyRate": self.hourly_rate,
            "totalAmount": self.total_amount,
            "notes": self.notes,
            "status": self.status.value,
            "dateSubmitted": self.date_submitted,
            "storedFilePath": self.stored_file_path,
            "originalFileName": self.original_file_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Claim":
        return cls(
            claim_id=str(read_field(data, "id")),
            lecturer_name=read_field(data, "lecturerName") or "",
            lecturer_id=read_field(data, "lecturerId") or "",
            lecturer_email=read_field(data, "lecturerEmail") or "",
            hours_worked=float(read_field(data, "hoursWorked", 0) or 0),
            hourly_rate=float(read_field(data, "hourlyRate", 0) or 0),
            total_amount=float(read_field(data, "totalAmount", 0) or 0),
            notes=read_field(data, "notes") or "",
            status=ClaimStatus(read_field(data, "status") or ClaimStatus.PENDING.value),
            date_submitted=read_field(data, "dateSubmitted") or "",
            stored_file_path=read_field(data, "storedFilePath"),
            original_file_name=read_field(data, "originalFileName"),
        )
