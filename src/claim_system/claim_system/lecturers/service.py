from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..claims.model import Claim
from ..claims.service import ClaimService
from ..common.security import hash_with_scheme, verify_password
from ..common.validators import require_non_empty
from ..core.enums import PasswordScheme
from ..core.exceptions import AuthenticationError, DuplicateLecturerIdError, LecturerNotFoundError, ValidationError
from .model import Lecturer
from .repository import LecturerRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LecturerSession:
    """What the lecturer screen shows after login."""

    lecturer: Lecturer
    claims: Sequence[Claim]
    auto_rejected: Sequence[Claim] = ()


class AuthService:
    """Use case: authenticate a lecturer (login)."""

    def __init__(self, lecturers: LecturerRepository, claim_service: ClaimService):
        self._lecturers = lecturers
        self._claim_service = claim_service

    def authenticate(self, lecturer_id: str, password: str) -> Lecturer:
        lecturer = self._lecturers.get_by_id((lecturer_id or "").strip())
        if not lecturer or not verify_password(lecturer.password_hash, password or ""):
            logger.warning("Failed login for lecturer id %r", lecturer_id)
            raise AuthenticationError("Invalid Lecturer ID or Password.")
        return lecturer

    def login(self, lecturer_id: str, password: str) -> LecturerSession:
        lecturer = self.authenticate(lecturer_id, password)
        changed = self._claim_service.reevaluate_on_login(lecturer.lecturer_id)
        return LecturerSession(
            lecturer=lecturer,
            claims=self._claim_service.list_for_lecturer(lecturer.lecturer_id),
            auto_rejected=changed,
        )


class LecturerService:
    """Use case: lecturer registration and lookup."""

    def __init__(self, lecturers: LecturerRepository, *, password_scheme: PasswordScheme = PasswordScheme.SHA256):
        self._lecturers = lecturers
        self._scheme = PasswordScheme(password_scheme)

    def register(self, *, lecturer_id: str, full_name: str, email: str, password: str) -> Lecturer:
        full_name = require_non_empty(full_name, "Full name")
        lecturer_id = require_non_empty(lecturer_id, "Lecturer ID")
        email = require_non_empty(email, "Email")
        if not password or not password.strip():
            raise ValidationError("Password is required")

        if self._lecturers.get_by_id(lecturer_id):
            raise DuplicateLecturerIdError("Lecturer ID already exists.")

        lecturer = Lecturer(
            lecturer_id=lecturer_id,
            full_name=full_name,
            email=email,
            password_hash=hash_with_scheme(password, self._scheme),
        )
        self._lecturers.add(lecturer)
        logger.info("Registered lecturer %s", lecturer_id)
        return lecturer

    def get(self, lecturer_id: str) -> Lecturer:
        lecturer = self._lecturers.get_by_id(lecturer_id)
        if not lecturer:
            raise LecturerNotFoundError("Lecturer not found.")
        return lecturer

    def list_all(self) -> Sequence[Lecturer]:
        return self._lecturers.list_all()
