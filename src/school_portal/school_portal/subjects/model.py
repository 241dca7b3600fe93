from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Subject:
    """Domain entity: a subject, shared by all classes."""

    subject_id: int
    name: str
    code: str

    def to_dict(self) -> dict:
        return {"id": self.subject_id, "name": self.name, "code": self.code}
