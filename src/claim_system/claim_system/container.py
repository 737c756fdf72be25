from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .attachments.service import AttachmentManager
from .claims.json_claim_repository import JsonClaimRepository
from .claims.rules import MinimumTotalRule
from .claims.service import ClaimService
from .core.constants import DEFAULT_MAX_ATTACHMENT_BYTES, DEFAULT_MIN_CLAIM_TOTAL
from .core.enums import PasswordScheme
from .lecturers.json_lecturer_repository import JsonLecturerRepository
from .lecturers.service import AuthService, LecturerService
from .reports.service import ReportService
from .storage.config import StorageConfig
from .storage.json_store import JsonFileStore


@dataclass(frozen=True)
class Container:
    storage: StorageConfig

    claims_repo: JsonClaimRepository
    lecturers_repo: JsonLecturerRepository

    attachment_manager: AttachmentManager
    claim_service: ClaimService
    lecturer_service: LecturerService
    auth_service: AuthService
    report_service: ReportService


def build_container(*, settings: Mapping[str, Any]) -> Container:
    storage = StorageConfig.from_path(settings.get("DATA_DIR"))
    storage.ensure_directories()

    claims_repo = JsonClaimRepository(JsonFileStore(storage.claims_path))
    lecturers_repo = JsonLecturerRepository(JsonFileStore(storage.lecturers_path))

    attachment_manager = AttachmentManager(
        storage.files_dir,
        max_bytes=int(settings.get("MAX_ATTACHMENT_BYTES", DEFAULT_MAX_ATTACHMENT_BYTES)),
    )
    claim_service = ClaimService(
        claims_repo,
        attachment_manager,
        rule=MinimumTotalRule(float(settings.get("MIN_CLAIM_TOTAL", DEFAULT_MIN_CLAIM_TOTAL))),
    )
    lecturer_service = LecturerService(
        lecturers_repo,
        password_scheme=PasswordScheme(settings.get("PASSWORD_SCHEME", PasswordScheme.SHA256.value)),
    )
    auth_service = AuthService(lecturers_repo, claim_service)
    report_service = ReportService(claims_repo, lecturers_repo)

    return Container(
        storage=storage,
        claims_repo=claims_repo,
        lecturers_repo=lecturers_repo,
        attachment_manager=attachment_manager,
        claim_service=claim_service,
        lecturer_service=lecturer_service,
        auth_service=auth_service,
        report_service=report_service,
    )
