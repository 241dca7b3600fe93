from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..access.model import Actor, require_role
from ..access.service import AccessControlService
from ..common.datetime_utils import today_local
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import InvalidStatusError
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def parse_status(value) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise InvalidStatusError(f"Status must be one of: {allowed}")


class AttendanceService:
    """Use case: an admin takes attendance for students of their own class."""

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository, access: AccessControlService):
        self._attendance = attendance
        self._students = students
        self._access = access

    def list_roster(self, actor: Actor) -> Sequence[Student]:
        require_role(actor, Role.ADMIN)
        owned = self._access.resolve_owned_class(actor.actor_id)
        return self._students.list_by_class_id(owned.class_id)

    def record_attendance(
        self,
        actor: Actor,
        *,
        student_id: int,
        status,
        on_date: Optional[date] = None,
    ) -> AttendanceRecord:
        require_role(actor, Role.ADMIN)
        parsed = parse_status(status)
        student = self._access.authorize_student_access(actor, student_id)

        attendance_id = self._attendance.create_record(
            student_id=student.student_id,
            attendance_date=on_date or today_local(),
            status=parsed,
        )
        logger.info("Attendance %s recorded for student id=%s", parsed.value, student.student_id)
        return self._attendance.get_by_id(attendance_id)
