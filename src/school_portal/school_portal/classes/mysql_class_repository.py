from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.exceptions import ClassOwnershipConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import SchoolClass
from .repository import ClassRepository

_COLUMNS = "id, name, admin_id, admin_name"


def _to_class(row: dict) -> SchoolClass:
    return SchoolClass(
        class_id=int(row["id"]),
        name=row["name"],
        admin_id=int(row["admin_id"]),
        admin_name=row["admin_name"],
    )


class MySQLClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, class_id: int) -> Optional[SchoolClass]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM classes WHERE id=%s", (class_id,))
            row = fetchone(cur)
            return _to_class(row) if row else None

    def list_all(self) -> Sequence[SchoolClass]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM classes ORDER BY id")
            return [_to_class(r) for r in fetchall(cur)]

    def list_by_admin_id(self, admin_id: int) -> Sequence[SchoolClass]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM classes WHERE admin_id=%s ORDER BY id", (admin_id,))
            return [_to_class(r) for r in fetchall(cur)]

    def create_class(self, *, name: str, admin_id: int, admin_name: str) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO classes(name, admin_id, admin_name) VALUES(%s,%s,%s)",
                    (name, admin_id, admin_name),
                )
                return int(cur.lastrowid)
        except IntegrityError as e:
            if is_duplicate_key(e, "uq_classes_admin_id"):
                raise ClassOwnershipConflictError(f"Admin {admin_name!r} already manages a class") from e
            raise

    def delete_by_id(self, class_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM classes WHERE id=%s", (class_id,))
            return cur.rowcount > 0
