from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(row: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(row["id"]),
        student_id=int(row["student_id"]),
        attendance_date=row["attendance_date"],
        status=AttendanceStatus(row["status"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, student_id, attendance_date, status FROM attendance_records WHERE id=%s",
                (attendance_id,),
            )
            row = fetchone(cur)
            return _to_record(row) if row else None

    def create_record(self, *, student_id: int, attendance_date: date, status: AttendanceStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(student_id, attendance_date, status)
                VALUES(%s,%s,%s)
                """,
                (student_id, attendance_date, status.value),
            )
            return int(cur.lastrowid)

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, student_id, attendance_date, status
                FROM attendance_records
                WHERE student_id=%s
                ORDER BY attendance_date, id
                """,
                (student_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]
