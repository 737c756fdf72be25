from __future__ import annotations

import json

import pytest

from src.claim_system.claim_system.claims.json_claim_repository import JsonClaimRepository
from src.claim_system.claim_system.claims.model import Claim
from src.claim_system.claim_system.core.enums import ClaimStatus
from src.claim_system.claim_system.core.exceptions import StorageError
from src.claim_system.claim_system.lecturers.json_lecturer_repository import JsonLecturerRepository
from src.claim_system.claim_system.lecturers.model import Lecturer
from src.claim_system.claim_system.storage.config import StorageConfig
from src.claim_system.claim_system.storage.json_store import JsonFileStore


def _claim(claim_id: str, **overrides) -> Claim:
    data = dict(
        claim_id=claim_id,
        lecturer_name="Jane Doe",
        lecturer_id="L001",
        lecturer_email="jane@example.com",
        hours_worked=10.0,
        hourly_rate=15.0,
        total_amount=150.0,
        notes="Marking",
        status=ClaimStatus.PENDING,
        date_submitted="2026-02-01 09:30",
    )
    data.update(overrides)
    return Claim(**data)


def test_missing_file_loads_empty(tmp_path):
    assert JsonFileStore(tmp_path / "claims.json").load_records() == []


def test_corrupted_file_raises_storage_error(tmp_path):
    path = tmp_path / "claims.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StorageError):
        JsonFileStore(path).load_records()


def test_claims_round_trip(tmp_path):
    store = JsonFileStore(tmp_path / "claims.json")
    repo = JsonClaimRepository(store)
    first = _claim("a")
    second = _claim("b", stored_file_path="/x/y.pdf", original_file_name="y.pdf", status=ClaimStatus.REJECTED)
    repo.add(first)
    repo.add(second)

    reloaded = JsonClaimRepository(JsonFileStore(tmp_path / "claims.json"))

    assert sorted(reloaded.list_all(), key=lambda c: c.claim_id) == [first, second]


def test_file_uses_camel_case_array(tmp_path):
    path = tmp_path / "claims.json"
    JsonClaimRepository(JsonFileStore(path)).add(_claim("a"))

    data = json.loads(path.read_text(encoding="utf-8"))

    assert isinstance(data, list)
    assert data[0]["id"] == "a"
    assert data[0]["totalAmount"] == 150.0
    assert data[0]["status"] == "Pending"
    assert data[0]["storedFilePath"] is None


def test_status_change_is_persisted(tmp_path):
    path = tmp_path / "claims.json"
    repo = JsonClaimRepository(JsonFileStore(path))
    repo.add(_claim("a"))

    repo.set_status("a", ClaimStatus.APPROVED)

    assert JsonClaimRepository(JsonFileStore(path)).get_by_id("a").status == ClaimStatus.APPROVED
    assert repo.set_status("missing", ClaimStatus.APPROVED) is None


def test_loads_pascal_case_files(tmp_path):
    path = tmp_path / "claims.json"
    path.write_text(
        json.dumps(
            [
                {
                    "Id": "legacy",
                    "LecturerName": "Old Timer",
                    "LecturerId": "L9",
                    "LecturerEmail": "old@example.com",
                    "HoursWorked": 2,
                    "HourlyRate": 20,
                    "TotalAmount": 40,
                    "Notes": None,
                    "Status": "Rejected",
                    "DateSubmitted": "2024-05-01 10:00",
                    "StoredFilePath": None,
                    "OriginalFileName": None,
                }
            ]
        ),
        encoding="utf-8",
    )

    claim = JsonClaimRepository(JsonFileStore(path)).get_by_id("legacy")

    assert claim.lecturer_id == "L9"
    assert claim.total_amount == 40.0
    assert claim.notes == ""
    assert claim.status == ClaimStatus.REJECTED


def test_lecturers_round_trip(tmp_path):
    path = tmp_path / "lecturers.json"
    lecturer = Lecturer(lecturer_id="L001", full_name="Jane Doe", email="jane@example.com", password_hash="h")
    JsonLecturerRepository(JsonFileStore(path)).add(lecturer)

    reloaded = JsonLecturerRepository(JsonFileStore(path))

    assert reloaded.list_all() == [lecturer]
    assert reloaded.get_by_id("L001") == lecturer
    assert reloaded.get_by_id("l001") is None


def test_write_failure_leaves_memory_unchanged(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    repo = JsonClaimRepository(JsonFileStore(blocker / "claims.json"))

    with pytest.raises(StorageError):
        repo.add(_claim("a"))
    assert repo.list_all() == []


def test_storage_config_paths(tmp_path):
    storage = StorageConfig.from_path(tmp_path / "data")
    storage.ensure_directories()

    assert storage.claims_path.name == "claims.json"
    assert storage.lecturers_path.name == "lecturers.json"
    assert storage.files_dir.is_dir()


class FailingStore(JsonFileStore):
    def __init__(self, path):
        super().__init__(path)
        self.fail = False

    def save_records(self, records):
        if self.fail:
            raise StorageError("disk full")
        super().save_records(records)


def test_status_write_failure_leaves_memory_unchanged(tmp_path):
    path = tmp_path / "claims.json"
    store = FailingStore(path)
    repo = JsonClaimRepository(store)
    repo.add(_claim("a"))
    repo.add(_claim("b"))
    store.fail = True

    with pytest.raises(StorageError):
        repo.set_status("a", ClaimStatus.APPROVED)
    with pytest.raises(StorageError):
        repo.set_statuses(["a", "b"], ClaimStatus.REJECTED)

    assert [c.status for c in repo.list_all()] == [ClaimStatus.PENDING, ClaimStatus.PENDING]
    on_disk = JsonClaimRepository(JsonFileStore(path)).list_all()
    assert [c.status for c in on_disk] == [ClaimStatus.PENDING, ClaimStatus.PENDING]


@pytest.mark.parametrize(
    "record",
    [
        {"id": "x", "status": "approved"},
        {"id": "x", "status": "Pending", "hoursWorked": "abc"},
    ],
)
def test_invalid_claim_record_raises_storage_error(tmp_path, record):
    path = tmp_path / "claims.json"
    path.write_text(json.dumps([record]), encoding="utf-8")

    with pytest.raises(StorageError):
        JsonClaimRepository(JsonFileStore(path))


def test_non_object_entries_raise_storage_error(tmp_path):
    path = tmp_path / "claims.json"
    path.write_text(json.dumps([1, {"id": "x", "status": "Pending"}]), encoding="utf-8")

    with pytest.raises(StorageError):
        JsonFileStore(path).load_records()


def test_claim_has_file(tmp_path):
    attachment = tmp_path / "doc.pdf"

    assert not _claim("a").has_file
    assert not _claim("a", stored_file_path=str(attachment)).has_file

    attachment.write_bytes(b"%PDF")
    assert _claim("a", stored_file_path=str(attachment)).has_file
