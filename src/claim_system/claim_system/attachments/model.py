from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StoredAttachment:
    """A supporting document copied into managed storage."""

    stored_path: Path
    original_name: str
