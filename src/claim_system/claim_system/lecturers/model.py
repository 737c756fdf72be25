from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..storage.json_store import read_field


@dataclass(frozen=True)
class Lecturer:
    """Domain entity: a registered lecturer.

    Note: password_hash only; the plaintext password is never stored.
    """

    lecturer_id: str
    full_name: str
    email: str
    password_hash: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lecturerId": self.lecturer_id,
            "fullName": self.full_name,
            "email": self.email,
            "passwordHash": self.password_hash,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Lecturer":
        return cls(
            lecturer_id=read_field(data, "lecturerId") or "",
            full_name=read_field(data, "fullName") or "",
            email=read_field(data, "email") or "",
            password_hash=read_field(data, "passwordHash") or "",
        )
