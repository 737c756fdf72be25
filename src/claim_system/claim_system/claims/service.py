from __future__ import annotations

import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from ..attachments.service import AttachmentManager
from ..common.datetime_utils import format_submitted, now_local
from ..common.validators import require_non_empty, require_non_negative_number
from ..core.enums import ClaimStatus, Decision
from ..core.exceptions import ClaimNotFoundError, ValidationError
from .calculator.base import ClaimCalculator
from .calculator.standard_calculator import StandardClaimCalculator
from .model import Claim
from .repository import ClaimRepository
from .rules import AdjudicationRule, MinimumTotalRule

logger = logging.getLogger(__name__)

Number = Union[str, int, float]


class ClaimService:
    """Use cases: submit claims, auto-adjudicate them, record manager decisions."""

    def __init__(
        self,
        claims: ClaimRepository,
        attachments: Optional[AttachmentManager] = None,
        *,
        calculator: Optional[ClaimCalculator] = None,
        rule: Optional[AdjudicationRule] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._claims = claims
        self._attachments = attachments
        self._calculator = calculator or StandardClaimCalculator()
        self._rule = rule or MinimumTotalRule()
        self._clock = clock

    def submit_claim(
        self,
        *,
        lecturer_name: str,
        lecturer_id: str,
        lecturer_email: str,
        hours_worked: Number,
        hourly_rate: Number,
        notes: Optional[str] = None,
        attachment: Optional[str] = None,
    ) -> Claim:
        lecturer_name = require_non_empty(lecturer_name, "Lecturer name")
        lecturer_id = require_non_empty(lecturer_id, "Lecturer ID")
        lecturer_email = require_non_empty(lecturer_email, "Lecturer email")
        hours = require_non_negative_number(hours_worked, "Hours worked")
        rate = require_non_negative_number(hourly_rate, "Hourly rate")

        total = self._calculator.total(hours, rate)
        status = self._rule.initial_status(total)

        stored_path = None
        original_name = None
        if attachment:
            if not self._attachments:
                raise ValidationError("Attachments are not available")
            stored = self._attachments.store(attachment)
            stored_path = str(stored.stored_path)
            original_name = stored.original_name

        claim = Claim(
            claim_id=str(uuid.uuid4()),
            lecturer_name=lecturer_name,
            lecturer_id=lecturer_id,
            lecturer_email=lecturer_email,
            hours_worked=hours,
            hourly_rate=rate,
            total_amount=total,
            notes=(notes or "").strip(),
            status=status,
            date_submitted=format_submitted(self._clock()),
            stored_file_path=stored_path,
            original_file_name=original_name,
        )
        try:
            self._claims.add(claim)
        except Exception:
            if stored_path:
                Path(stored_path).unlink(missing_ok=True)
            raise

        if status == ClaimStatus.REJECTED:
            logger.info("Claim %s automatically rejected: total %.2f below minimum", claim.claim_id, total)
        else:
            logger.info("Claim %s submitted by %s (total %.2f)", claim.claim_id, lecturer_id, total)
        return claim

    def reevaluate_on_login(self, lecturer_id: str) -> Sequence[Claim]:
        """Re-apply the automatic rule to a lecturer's claims; returns the claims that changed."""
        to_reject = [
            c.claim_id
            for c in self._claims.list_for_lecturer(lecturer_id)
            if self._rule.reevaluate(c) == ClaimStatus.REJECTED
        ]
        if not to_reject:
            return []

        changed = self._claims.set_statuses(to_reject, ClaimStatus.REJECTED)
        logger.info("Auto-rejected %d pending claim(s) for lecturer %s", len(changed), lecturer_id)
        return changed

    @staticmethod
    def _parse_decision(decision: Union[Decision, str]) -> Decision:
        if isinstance(decision, Decision):
            return decision
        try:
            return Decision(str(decision).strip().lower())
        except ValueError:
            raise ValidationError("Invalid decision")

    def decide(self, claim_id: str, decision: Union[Decision, str]) -> Claim:
        current = self._claims.get_by_id(claim_id)
        if not current:
            raise ClaimNotFoundError("Claim not found")

        new_status = self._parse_decision(decision).status
        if current.status not in {ClaimStatus.PENDING, new_status}:
            # Allowed, but a reversal of an earlier decision is worth noticing.
            logger.warning("Claim %s changed from %s to %s", claim_id, current.status.value, new_status.value)

        updated = self._claims.set_status(claim_id, new_status)
        if not updated:
            raise ClaimNotFoundError("Claim not found")

        logger.info("Claim %s marked %s", claim_id, new_status.value)
        return updated

    def approve(self, claim_id: str) -> Claim:
        return self.decide(claim_id, Decision.APPROVE)

    def reject(self, claim_id: str) -> Claim:
        return self.decide(claim_id, Decision.REJECT)

    def get(self, claim_id: str) -> Claim:
        claim = self._claims.get_by_id(claim_id)
        if not claim:
            raise ClaimNotFoundError("Claim not found")
        return claim

    def list_all(self) -> Sequence[Claim]:
        return self._claims.list_all()

    def list_for_lecturer(self, lecturer_id: str) -> Sequence[Claim]:
        return self._claims.list_for_lecturer(lecturer_id)
