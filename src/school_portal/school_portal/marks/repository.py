from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import MarkRecord, MarkRow


class MarkRepository(Protocol):
    def get_by_id(self, mark_id: int) -> Optional[MarkRecord]:
        raise NotImplementedError

    def create_record(self, *, student_id: int, subject_id: int, mark: float) -> int:
        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[MarkRow]:
        """Marks of one student, joined with subject."""

        raise NotImplementedError

    def list_for_class(self, class_id: int) -> Sequence[MarkRow]:
        """Marks of every student currently in the class, joined with student and subject."""

        raise NotImplementedError
