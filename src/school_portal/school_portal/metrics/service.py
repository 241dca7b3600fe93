from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..access.model import Actor
from ..access.service import AccessControlService
from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..marks.model import MarkRow
from ..marks.repository import MarkRepository
from .calculator import attendance_percentage, average_mark


@dataclass(frozen=True)
class AttendanceSummary:
    percent: float
    records: Sequence[AttendanceRecord]

    def to_dict(self) -> dict:
        return {"percent": self.percent, "records": [r.to_dict() for r in self.records]}


@dataclass(frozen=True)
class PerformanceSummary:
    average: float
    scores: Sequence[MarkRow]

    def to_dict(self) -> dict:
        return {"average": self.average, "scores": [s.to_dict() for s in self.scores]}


class StudentReportService:
    """Student-facing views: attendance percentage and average mark."""

    def __init__(self, attendance: AttendanceRepository, marks: MarkRepository, access: AccessControlService):
        self._attendance = attendance
        self._marks = marks
        self._access = access

    def attendance_summary(self, actor: Actor, *, student_id: int) -> AttendanceSummary:
        student = self._access.authorize_student_access(actor, student_id)
        records = list(self._attendance.list_for_student(student.student_id))
        return AttendanceSummary(percent=attendance_percentage(records), records=records)

    def performance_summary(self, actor: Actor, *, student_id: int) -> PerformanceSummary:
        student = self._access.authorize_student_access(actor, student_id)
        scores = list(self._marks.list_for_student(student.student_id))
        return PerformanceSummary(average=average_mark(scores), scores=scores)
