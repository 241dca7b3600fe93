from __future__ import annotations

import logging
from typing import Sequence

from ..access.model import Actor, require_role
from ..access.service import AccessControlService
from ..common.validators import require_finite_number, require_int_id
from ..core.enums import Role
from ..core.exceptions import NotFoundError
from ..subjects.repository import SubjectRepository
from .model import MarkRecord, MarkRow
from .repository import MarkRepository

logger = logging.getLogger(__name__)


class MarkService:
    """Use case: an admin posts and reviews marks for their own class.

    Marks are not range-checked: any finite number is stored as given.
    """

    def __init__(self, marks: MarkRepository, subjects: SubjectRepository, access: AccessControlService):
        self._marks = marks
        self._subjects = subjects
        self._access = access

    def record_mark(self, actor: Actor, *, student_id: int, subject_id, mark) -> MarkRecord:
        require_role(actor, Role.ADMIN)
        value = require_finite_number(mark, "Mark")
        subject_id = require_int_id(subject_id, "Subject id")

        student = self._access.authorize_student_access(actor, student_id)
        if not self._subjects.get_by_id(subject_id):
            raise NotFoundError("Subject not found")

        mark_id = self._marks.create_record(student_id=student.student_id, subject_id=subject_id, mark=value)
        logger.info("Mark recorded for student id=%s subject id=%s", student.student_id, subject_id)
        return self._marks.get_by_id(mark_id)

    def list_class_marks(self, actor: Actor) -> Sequence[MarkRow]:
        require_role(actor, Role.ADMIN)
        owned = self._access.resolve_owned_class(actor.actor_id)
        return self._marks.list_for_class(owned.class_id)
