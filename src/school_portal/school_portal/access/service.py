from __future__ import annotations

import logging

from ..classes.model import SchoolClass
from ..classes.repository import ClassRepository
from ..core.enums import Role
from ..core.exceptions import AmbiguousOwnershipError, AuthorizationError, NotFoundError
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import Actor

logger = logging.getLogger(__name__)


class AccessControlService:
    """Tenant scoping: which class an admin owns and which students an actor may touch.

    Every class-scoped operation goes through ``resolve_owned_class`` and every
    per-student operation through ``authorize_student_access``; identifiers sent
    by the client are never trusted without one of these checks.
    """

    def __init__(self, classes: ClassRepository, students: StudentRepository):
        self._classes = classes
        self._students = students

    def resolve_owned_class(self, admin_user_id: int) -> SchoolClass:
        owned = list(self._classes.list_by_admin_id(int(admin_user_id)))
        if not owned:
            raise NotFoundError("You do not manage any class")
        if len(owned) > 1:
            logger.error("Admin %s owns %d classes", admin_user_id, len(owned))
            raise AmbiguousOwnershipError(f"Admin {admin_user_id} owns {len(owned)} classes")
        return owned[0]

    def authorize_student_access(self, actor: Actor, target_student_id: int) -> Student:
        student = self._students.get_by_id(int(target_student_id))
        if not student:
            raise NotFoundError("Student not found")

        if actor.role == Role.STUDENT:
            if actor.actor_id != student.student_id:
                raise AuthorizationError("Students may only access their own records")
            return student

        if actor.role == Role.ADMIN:
            owned = self.resolve_owned_class(actor.actor_id)
            if student.class_id != owned.class_id:
                raise AuthorizationError("Student does not belong to your class")
            return student

        raise AuthorizationError("You do not have permission to access student records")
