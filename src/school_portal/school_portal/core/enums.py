from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Actor roles used for authorization."""

    SUPERADMIN = "superadmin"
    ADMIN = "admin"
    STUDENT = "student"


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the database."""

    PRESENT = "present"
    ABSENT = "absent"
