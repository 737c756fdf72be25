from __future__ import annotations

from pathlib import Path

import pytest

from src.claim_system.claim_system.attachments import opener
from src.claim_system.claim_system.attachments.service import AttachmentManager
from src.claim_system.claim_system.core.exceptions import (
    AttachmentNotFoundError,
    AttachmentOpenError,
    FileTooLargeError,
    InvalidFileTypeError,
)

MB = 1024 * 1024


def _make_file(path: Path, size: int) -> Path:
    with path.open("wb") as f:
        f.truncate(size)
    return path


def test_rejects_disallowed_extension(tmp_path):
    source = _make_file(tmp_path / "setup.exe", 10)
    manager = AttachmentManager(tmp_path / "Files")

    with pytest.raises(InvalidFileTypeError):
        manager.store(source)


def test_rejects_file_over_five_mib(tmp_path):
    source = _make_file(tmp_path / "big.pdf", 6 * MB)
    manager = AttachmentManager(tmp_path / "Files")

    with pytest.raises(FileTooLargeError):
        manager.store(source)
    assert not (tmp_path / "Files").exists() or not any((tmp_path / "Files").iterdir())


def test_accepts_file_at_exact_limit(tmp_path):
    source = _make_file(tmp_path / "edge.xlsx", 5 * MB)
    manager = AttachmentManager(tmp_path / "Files")
    assert manager.store(source).stored_path.suffix == ".xlsx"


def test_store_copies_into_managed_storage(tmp_path):
    source = _make_file(tmp_path / "Timesheet.PDF", 2 * MB)
    files_dir = tmp_path / "Files"
    manager = AttachmentManager(files_dir)

    stored = manager.store(source)

    assert stored.stored_path.parent == files_dir
    assert stored.stored_path.suffix.lower() == ".pdf"
    assert stored.stored_path.name != source.name
    assert stored.original_name == "Timesheet.PDF"
    assert stored.stored_path.stat().st_size == 2 * MB
    assert source.exists()


def test_each_store_gets_a_new_name(tmp_path):
    source = _make_file(tmp_path / "notes.docx", 100)
    manager = AttachmentManager(tmp_path / "Files")
    assert manager.store(source).stored_path != manager.store(source).stored_path


def test_store_missing_source_raises(tmp_path):
    manager = AttachmentManager(tmp_path / "Files")
    with pytest.raises(AttachmentNotFoundError):
        manager.store(tmp_path / "missing.pdf")


def test_open_delegates_to_platform_opener(tmp_path):
    opened = []
    source = _make_file(tmp_path / "doc.pdf", 10)
    manager = AttachmentManager(tmp_path / "Files", opener=opened.append)

    stored = manager.store(source)
    manager.open(stored.stored_path)

    assert opened == [stored.stored_path]


def test_open_missing_file_raises(tmp_path):
    manager = AttachmentManager(tmp_path / "Files", opener=lambda p: None)
    with pytest.raises(AttachmentNotFoundError):
        manager.open(tmp_path / "Files" / "gone.pdf")
    with pytest.raises(AttachmentNotFoundError):
        manager.open(None)


def test_open_failure_is_reported(tmp_path):
    def broken_opener(path):
        raise OSError("no application associated")

    source = _make_file(tmp_path / "doc.pdf", 10)
    manager = AttachmentManager(tmp_path / "Files", opener=broken_opener)

    with pytest.raises(AttachmentOpenError):
        manager.open(manager.store(source).stored_path)


def test_default_opener_detaches_viewer(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(opener.sys, "platform", "linux")
    monkeypatch.setattr(opener.subprocess, "Popen", lambda args, **kwargs: calls.append((args, kwargs)))

    opener.open_with_default_app(tmp_path / "doc.pdf")

    assert calls == [(["xdg-open", str(tmp_path / "doc.pdf")], {"start_new_session": True})]
