from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.exceptions import DuplicateStudentCodeError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Student
from .repository import StudentRepository

_COLUMNS = "id, student_code, full_name, email, password_hash, class_id"


def _to_student(row: dict) -> Student:
    return Student(
        student_id=int(row["id"]),
        student_code=row["student_code"],
        full_name=row["full_name"],
        email=row["email"],
        password_hash=row["password_hash"],
        class_id=int(row["class_id"]),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE id=%s", (student_id,))
            row = fetchone(cur)
            return _to_student(row) if row else None

    def get_by_code(self, student_code: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE student_code=%s", (student_code,))
            row = fetchone(cur)
            return _to_student(row) if row else None

    def list_by_class_id(self, class_id: int) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE class_id=%s ORDER BY id", (class_id,))
            return [_to_student(r) for r in fetchall(cur)]

    def create_student(
        self,
        *,
        student_code: str,
        full_name: str,
        email: str,
        password_hash: str,
        class_id: int,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO students(student_code, full_name, email, password_hash, class_id)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (student_code, full_name, email, password_hash, class_id),
                )
                return int(cur.lastrowid)
        except IntegrityError as e:
            if is_duplicate_key(e, "uq_students_student_code"):
                raise DuplicateStudentCodeError(f"Student ID {student_code!r} is already in use") from e
            raise

    def delete_by_id(self, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE id=%s", (student_id,))
            return cur.rowcount > 0
