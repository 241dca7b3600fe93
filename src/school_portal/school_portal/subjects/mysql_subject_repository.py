from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Subject
from .repository import SubjectRepository


class MySQLSubjectRepository(SubjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, code FROM subjects WHERE id=%s", (subject_id,))
            row = fetchone(cur)
            if not row:
                return None
            return Subject(subject_id=int(row["id"]), name=row["name"], code=row["code"])

    def list_all(self) -> Sequence[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, code FROM subjects ORDER BY id")
            return [Subject(subject_id=int(r["id"]), name=r["name"], code=r["code"]) for r in fetchall(cur)]

    def create_subject(self, *, name: str, code: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO subjects(name, code) VALUES(%s,%s)", (name, code))
            return int(cur.lastrowid)

    def delete_by_id(self, subject_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM subjects WHERE id=%s", (subject_id,))
            return cur.rowcount > 0
