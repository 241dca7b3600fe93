from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MarkRecord:
    """Domain entity: one mark a student scored in a subject.

    Marks accumulate; several records per (student, subject) are allowed.
    """

    mark_id: int
    student_id: int
    subject_id: int
    mark: float

    def to_dict(self) -> dict:
        return {
            "id": self.mark_id,
            "studentId": self.student_id,
            "subjectId": self.subject_id,
            "mark": self.mark,
        }


@dataclass(frozen=True)
class MarkRow:
    """Read-model: a mark joined with its student and subject for display."""

    mark_id: int
    student_id: int
    subject_id: int
    mark: float
    student_code: Optional[str] = None
    full_name: Optional[str] = None
    subject_name: Optional[str] = None
    subject_code: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.mark_id,
            "mark": self.mark,
            "student": {
                "id": self.student_id,
                "studentId": self.student_code,
                "fullName": self.full_name,
            },
            "subject": {
                "id": self.subject_id,
                "name": self.subject_name,
                "code": self.subject_code,
            },
        }
