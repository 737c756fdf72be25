from __future__ import annotations

import logging
import shutil
import uuid
from pathlib import Path
from typing import Callable, Iterable, Optional

from ..core.constants import ALLOWED_ATTACHMENT_EXTENSIONS, DEFAULT_MAX_ATTACHMENT_BYTES
from ..core.exceptions import (
    AttachmentNotFoundError,
    AttachmentOpenError,
    FileTooLargeError,
    InvalidFileTypeError,
    StorageError,
)
from .model import StoredAttachment
from .opener import open_with_default_app

logger = logging.getLogger(__name__)


class AttachmentManager:
    """Validates supporting documents and keeps renamed copies in managed storage."""

    def __init__(
        self,
        files_dir: str | Path,
        *,
        max_bytes: int = DEFAULT_MAX_ATTACHMENT_BYTES,
        allowed_extensions: Iterable[str] = ALLOWED_ATTACHMENT_EXTENSIONS,
        opener: Optional[Callable[[Path], None]] = None,
    ):
        self._files_dir = Path(files_dir)
        self._max_bytes = int(max_bytes)
        self._allowed = frozenset(e.lower() for e in allowed_extensions)
        self._opener = opener or open_with_default_app

    @property
    def files_dir(self) -> Path:
        return self._files_dir

    def validate(self, source_path: str | Path) -> Path:
        source = Path(source_path)

        if source.suffix.lower() not in self._allowed:
            allowed = ", ".join(sorted(e.lstrip(".").upper() for e in self._allowed))
            raise InvalidFileTypeError(f"Only {allowed} formats are allowed.")

        if not source.is_file():
            raise AttachmentNotFoundError("File not found.")

        if source.stat().st_size > self._max_bytes:
            limit_mb = self._max_bytes / (1024 * 1024)
            raise FileTooLargeError(f"File too large. Maximum allowed size is {limit_mb:g} MB.")

        return source

    def store(self, source_path: str | Path) -> StoredAttachment:
        source = self.validate(source_path)

        target = self._files_dir / f"{uuid.uuid4()}{source.suffix}"
        try:
            self._files_dir.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
        except OSError as e:
            raise StorageError(f"Cannot copy attachment: {e}") from e

        logger.info("Stored attachment %s as %s", source.name, target.name)
        return StoredAttachment(stored_path=target, original_name=source.name)

    def open(self, stored_path: Optional[str | Path]) -> None:
        if not stored_path or not Path(stored_path).is_file():
            raise AttachmentNotFoundError("File not found.")

        path = Path(stored_path)
        try:
            self._opener(path)
        except OSError as e:
            logger.warning("Unable to open %s: %s", path, e)
            raise AttachmentOpenError(f"Unable to open file: {e}") from e
