from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Subject


class SubjectRepository(Protocol):
    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Subject]:
        raise NotImplementedError

    def create_subject(self, *, name: str, code: str) -> int:
        raise NotImplementedError

    def delete_by_id(self, subject_id: int) -> bool:
        raise NotImplementedError
