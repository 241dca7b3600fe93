from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import MarkRecord, MarkRow
from .repository import MarkRepository


def _to_row(r: dict) -> MarkRow:
    return MarkRow(
        mark_id=int(r["id"]),
        student_id=int(r["student_id"]),
        subject_id=int(r["subject_id"]),
        mark=float(r["mark"]),
        student_code=r.get("student_code"),
        full_name=r.get("full_name"),
        subject_name=r.get("subject_name"),
        subject_code=r.get("subject_code"),
    )


class MySQLMarkRepository(MarkRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, mark_id: int) -> Optional[MarkRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, student_id, subject_id, mark FROM mark_records WHERE id=%s", (mark_id,))
            r = fetchone(cur)
            if not r:
                return None
            return MarkRecord(
                mark_id=int(r["id"]),
                student_id=int(r["student_id"]),
                subject_id=int(r["subject_id"]),
                mark=float(r["mark"]),
            )

    def create_record(self, *, student_id: int, subject_id: int, mark: float) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO mark_records(student_id, subject_id, mark) VALUES(%s,%s,%s)",
                (student_id, subject_id, mark),
            )
            return int(cur.lastrowid)

    def list_for_student(self, student_id: int) -> Sequence[MarkRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT m.id, m.student_id, m.subject_id, m.mark,
                       sj.name AS subject_name, sj.code AS subject_code
                FROM mark_records m
                LEFT JOIN subjects sj ON sj.id = m.subject_id
                WHERE m.student_id=%s
                ORDER BY m.id
                """,
                (student_id,),
            )
            return [_to_row(r) for r in fetchall(cur)]

    def list_for_class(self, class_id: int) -> Sequence[MarkRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT m.id, m.student_id, m.subject_id, m.mark,
                       st.student_code, st.full_name,
                       sj.name AS subject_name, sj.code AS subject_code
                FROM mark_records m
                JOIN students st ON st.id = m.student_id
                LEFT JOIN subjects sj ON sj.id = m.subject_id
                WHERE st.class_id=%s
                ORDER BY m.id
                """,
                (class_id,),
            )
            return [_to_row(r) for r in fetchall(cur)]
