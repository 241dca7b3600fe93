from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def get_by_code(self, student_code: str) -> Optional[Student]:
        raise NotImplementedError

    def list_by_class_id(self, class_id: int) -> Sequence[Student]:
        raise NotImplementedError

    def create_student(
        self,
        *,
        student_code: str,
        full_name: str,
        email: str,
        password_hash: str,
        class_id: int,
    ) -> int:
        """Insert a student; raises DuplicateStudentCodeError if the code is taken."""

        raise NotImplementedError

    def delete_by_id(self, student_id: int) -> bool:
        raise NotImplementedError
