from __future__ import annotations

from typing import Optional

from mysql.connector.errors import IntegrityError

from ..core.enums import Role
from ..core.exceptions import DuplicateUsernameError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, is_duplicate_key
from .model import User
from .repository import UserRepository


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["id"]),
        username=row["username"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, username, password_hash, role FROM users WHERE id=%s", (user_id,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, username, password_hash, role FROM users WHERE username=%s", (username,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def create_user(self, *, username: str, password_hash: str, role: Role) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO users(username, password_hash, role) VALUES(%s,%s,%s)",
                    (username, password_hash, role.value),
                )
                return int(cur.lastrowid)
        except IntegrityError as e:
            if is_duplicate_key(e, "uq_users_username"):
                raise DuplicateUsernameError(f"Username {username!r} is already taken") from e
            raise

    def update_password(self, user_id: int, *, password_hash: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE users SET password_hash=%s WHERE id=%s", (password_hash, user_id))
            # rowcount is 0 when the hash is unchanged too; re-check existence.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM users WHERE id=%s", (user_id,))
            return fetchone(cur) is not None

    def delete_by_id(self, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE id=%s", (user_id,))
            return cur.rowcount > 0
