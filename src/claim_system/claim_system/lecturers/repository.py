from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Lecturer


class LecturerRepository(Protocol):
    def list_all(self) -> Sequence[Lecturer]:
        raise NotImplementedError

    def get_by_id(self, lecturer_id: str) -> Optional[Lecturer]:
        raise NotImplementedError

    def add(self, lecturer: Lecturer) -> None:
        raise NotImplementedError
