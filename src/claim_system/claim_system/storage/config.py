from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..core.constants import APP_FOLDER_NAME, CLAIMS_FILENAME, FILES_DIRNAME, LECTURERS_FILENAME


def default_data_dir() -> Path:
    """Per-user application data folder (LocalAppData on Windows, XDG data dir elsewhere)."""
    if sys.platform.startswith("win"):
        base = os.getenv("LOCALAPPDATA") or str(Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(base) / APP_FOLDER_NAME


@dataclass(frozen=True)
class StorageConfig:
    data_dir: Path

    @classmethod
    def from_path(cls, data_dir: Optional[str | Path]) -> "StorageConfig":
        return cls(Path(data_dir) if data_dir else default_data_dir())

    @property
    def claims_path(self) -> Path:
        return self.data_dir / CLAIMS_FILENAME

    @property
    def lecturers_path(self) -> Path:
        return self.data_dir / LECTURERS_FILENAME

    @property
    def files_dir(self) -> Path:
        return self.data_dir / FILES_DIRNAME

    def ensure_directories(self) -> None:
        self.files_dir.mkdir(parents=True, exist_ok=True)
