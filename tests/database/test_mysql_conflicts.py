from __future__ import annotations

import pytest
from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from src.school_portal.school_portal.classes.mysql_class_repository import MySQLClassRepository
from src.school_portal.school_portal.core.enums import Role
from src.school_portal.school_portal.core.exceptions import (
    ClassOwnershipConflictError,
    DuplicateStudentCodeError,
    DuplicateUsernameError,
)
from src.school_portal.school_portal.database.mysql_base import is_duplicate_key
from src.school_portal.school_portal.students.mysql_student_repository import MySQLStudentRepository
from src.school_portal.school_portal.users.mysql_user_repository import MySQLUserRepository


def _duplicate(index: str) -> IntegrityError:
    return IntegrityError(msg=f"Duplicate entry 'x' for key '{index}'", errno=errorcode.ER_DUP_ENTRY)


class FakeCursor:
    def __init__(self, error):
        self._error = error
        self.closed = False

    def execute(self, sql, params=None):
        raise self._error

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, error):
        self.cursor_obj = FakeCursor(error)
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self.cursor_obj

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    def __init__(self, error):
        self._error = error
        self.connections = []

    def connect(self):
        conn = FakeConnection(self._error)
        self.connections.append(conn)
        return conn


def _create_user(repo):
    return repo.create_user(username="t1", password_hash="h", role=Role.ADMIN)


def _create_class(repo):
    return repo.create_class(name="7A", admin_id=1, admin_name="t1")


def _create_student(repo):
    return repo.create_student(
        student_code="S-1",
        full_name="Ana",
        email="a@x.y",
        password_hash="h",
        class_id=1,
    )


CASES = [
    (MySQLUserRepository, _create_user, "users.uq_users_username", DuplicateUsernameError),
    (MySQLClassRepository, _create_class, "classes.uq_classes_admin_id", ClassOwnershipConflictError),
    (MySQLStudentRepository, _create_student, "students.uq_students_student_code", DuplicateStudentCodeError),
]


@pytest.mark.parametrize("repo_cls, insert, index, expected", CASES)
def test_duplicate_key_becomes_conflict_error(repo_cls, insert, index, expected):
    factory = FakeConnectionFactory(_duplicate(index))

    with pytest.raises(expected):
        insert(repo_cls(factory))

    conn = factory.connections[0]
    assert conn.rolled_back and not conn.committed
    assert conn.closed and conn.cursor_obj.closed


@pytest.mark.parametrize("repo_cls, insert, index, expected", CASES)
def test_other_integrity_errors_are_reraised(repo_cls, insert, index, expected):
    error = IntegrityError(msg="Cannot add or update a child row", errno=errorcode.ER_NO_REFERENCED_ROW_2)
    factory = FakeConnectionFactory(error)

    with pytest.raises(IntegrityError) as excinfo:
        insert(repo_cls(factory))

    assert not isinstance(excinfo.value, expected)
    assert excinfo.value.errno == errorcode.ER_NO_REFERENCED_ROW_2


@pytest.mark.parametrize("repo_cls, insert, index, expected", CASES)
def test_duplicate_on_another_index_is_reraised(repo_cls, insert, index, expected):
    factory = FakeConnectionFactory(_duplicate("PRIMARY"))

    with pytest.raises(IntegrityError):
        insert(repo_cls(factory))


def test_is_duplicate_key_checks_errno_and_index():
    assert is_duplicate_key(_duplicate("users.uq_users_username"), "uq_users_username")
    assert not is_duplicate_key(_duplicate("users.uq_users_username"), "uq_classes_admin_id")
    other = IntegrityError(msg="uq_users_username", errno=errorcode.ER_NO_REFERENCED_ROW_2)
    assert not is_duplicate_key(other, "uq_users_username")
