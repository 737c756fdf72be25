from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


class JsonFileStore:
    """One JSON array file, read and rewritten as a whole.

    Note: There is no locking; a single process owns the data folder.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_records(self) -> List[Dict[str, Any]]:
        if not self._path.exists():
            logger.debug("No data file at %s, starting empty", self._path)
            return []

        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot read {self._path}: {e}") from e

        if not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Corrupted data file {self._path}: {e}") from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise StorageError(f"Expected a JSON array in {self._path}")

        bad = [i for i, item in enumerate(data) if not isinstance(item, dict)]
        if bad:
            raise StorageError(f"Expected JSON objects in {self._path}, found other values at index {bad}")

        logger.debug("Loaded %d records from %s", len(data), self._path)
        return [dict(item) for item in data]

    def save_records(self, records: Sequence[Dict[str, Any]]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(list(records), ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot write {self._path}: {e}") from e

        logger.debug("Saved %d records to %s", len(records), self._path)


def read_field(data: Dict[str, Any], key: str, default: Any = None) -> Any:
    """Read a camelCase key, falling back to the PascalCase spelling of older files."""
    if key in data:
        return data[key]
    return data.get(key[:1].upper() + key[1:], default)
