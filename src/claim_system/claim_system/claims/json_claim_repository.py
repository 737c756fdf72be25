from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional, Sequence

from ..core.enums import ClaimStatus
from ..core.exceptions import StorageError
from ..storage.json_store import JsonFileStore
from .model import Claim
from .repository import ClaimRepository


class JsonClaimRepository(ClaimRepository):
    """Claims held in memory, rewritten to claims.json after every mutation."""

    def __init__(self, store: JsonFileStore):
        self._store = store
        try:
            self._claims: List[Claim] = [Claim.from_dict(r) for r in store.load_records()]
        except (ValueError, TypeError) as e:
            raise StorageError(f"Invalid claim record in {store.path}: {e}") from e

    def _save(self) -> None:
        self._store.save_records([c.to_dict() for c in self._claims])

    def _index_of(self, claim_id: str) -> int:
        for i, c in enumerate(self._claims):
            if c.claim_id == claim_id:
                return i
        return -1

    def list_all(self) -> Sequence[Claim]:
        return list(self._claims)

    def list_for_lecturer(self, lecturer_id: str) -> Sequence[Claim]:
        return [c for c in self._claims if c.lecturer_id == lecturer_id]

    def get_by_id(self, claim_id: str) -> Optional[Claim]:
        i = self._index_of(claim_id)
        return self._claims[i] if i >= 0 else None

    def add(self, claim: Claim) -> None:
        self._claims.append(claim)
        try:
            self._save()
        except Exception:
            self._claims.pop()
            raise

    def set_status(self, claim_id: str, status: ClaimStatus) -> Optional[Claim]:
        updated = self.set_statuses([claim_id], status)
        return updated[0] if updated else None

    def set_statuses(self, claim_ids: Iterable[str], status: ClaimStatus) -> Sequence[Claim]:
        previous = list(self._claims)
        updated: list[Claim] = []
        for claim_id in claim_ids:
            i = self._index_of(claim_id)
            if i < 0:
                continue
            self._claims[i] = replace(self._claims[i], status=status)
            updated.append(self._claims[i])

        if updated:
            try:
                self._save()
            except Exception:
                self._claims = previous
                raise
        return updated
