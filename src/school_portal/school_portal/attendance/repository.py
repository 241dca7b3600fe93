from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_record(self, *, student_id: int, attendance_date: date, status: AttendanceStatus) -> int:
        """Append a record; never updates an existing same-day record."""

        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
