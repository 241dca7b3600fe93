from __future__ import annotations

import logging
from typing import Sequence

from werkzeug.security import generate_password_hash

from ..access.model import Actor, require_role
from ..access.service import AccessControlService
from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import DuplicateStudentCodeError, NotFoundError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: an admin manages the students of the class they own."""

    def __init__(self, students: StudentRepository, access: AccessControlService):
        self._students = students
        self._access = access

    def create_student(
        self,
        actor: Actor,
        *,
        student_code: str,
        full_name: str,
        email: str,
        password: str,
    ) -> Student:
        require_role(actor, Role.ADMIN)
        owned = self._access.resolve_owned_class(actor.actor_id)

        student_code = require_non_empty(student_code, "Student ID")
        full_name = require_non_empty(full_name, "Full name")
        email = require_non_empty(email, "Email")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._students.get_by_code(student_code):
            raise DuplicateStudentCodeError(f"Student ID {student_code!r} is already in use")

        student_id = self._students.create_student(
            student_code=student_code,
            full_name=full_name,
            email=email,
            password_hash=generate_password_hash(password),
            class_id=owned.class_id,
        )
        logger.info("Admin %s enrolled student %s in class %s", actor.actor_id, student_code, owned.class_id)
        return self._students.get_by_id(student_id)

    def list_students(self, actor: Actor) -> Sequence[Student]:
        require_role(actor, Role.ADMIN)
        owned = self._access.resolve_owned_class(actor.actor_id)
        return self._students.list_by_class_id(owned.class_id)

    def get_student(self, actor: Actor, *, student_id: int) -> Student:
        return self._access.authorize_student_access(actor, student_id)

    def delete_student(self, actor: Actor, *, student_id: int) -> None:
        """Delete a student record; attendance and marks rows are left as they are."""

        require_role(actor, Role.ADMIN)
        student = self._access.authorize_student_access(actor, student_id)
        if not self._students.delete_by_id(student.student_id):
            raise NotFoundError("Student not found")
        logger.info("Admin %s deleted student id=%s", actor.actor_id, student.student_id)
