from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark for a student on a date.

    Several records may exist for the same (student, date); they all count.
    """

    attendance_id: int
    student_id: int
    attendance_date: date
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "studentId": self.student_id,
            "date": self.attendance_date.strftime("%Y-%m-%d"),
            "status": self.status.value,
        }
