from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Domain entity: a student enrolled in one class.

    ``student_id`` is the internal key; ``student_code`` is the school-issued
    code the student logs in with (serialized as ``studentId``).
    """

    student_id: int
    student_code: str
    full_name: str
    email: str
    password_hash: str
    class_id: int

    def to_public_dict(self) -> dict:
        return {
            "id": self.student_id,
            "studentId": self.student_code,
            "fullName": self.full_name,
            "email": self.email,
            "classId": self.class_id,
        }
