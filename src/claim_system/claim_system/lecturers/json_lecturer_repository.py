from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.exceptions import StorageError
from ..storage.json_store import JsonFileStore
from .model import Lecturer
from .repository import LecturerRepository


class JsonLecturerRepository(LecturerRepository):
    """Lecturers held in memory, rewritten to lecturers.json after every mutation."""

    def __init__(self, store: JsonFileStore):
        self._store = store
        try:
            self._lecturers: List[Lecturer] = [Lecturer.from_dict(r) for r in store.load_records()]
        except (ValueError, TypeError) as e:
            raise StorageError(f"Invalid lecturer record in {store.path}: {e}") from e

    def list_all(self) -> Sequence[Lecturer]:
        return list(self._lecturers)

    def get_by_id(self, lecturer_id: str) -> Optional[Lecturer]:
        for lecturer in self._lecturers:
            if lecturer.lecturer_id == lecturer_id:
                return lecturer
        return None

    def add(self, lecturer: Lecturer) -> None:
        self._lecturers.append(lecturer)
        try:
            self._store.save_records([x.to_dict() for x in self._lecturers])
        except Exception:
            self._lecturers.pop()
            raise
