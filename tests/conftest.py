from __future__ import annotations

from datetime import date
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.school_portal.school_portal.access.model import Actor
from src.school_portal.school_portal.attendance.model import AttendanceRecord
from src.school_portal.school_portal.classes.model import SchoolClass
from src.school_portal.school_portal.container import Container, wire_services
from src.school_portal.school_portal.core.enums import AttendanceStatus, Role
from src.school_portal.school_portal.core.exceptions import (
    ClassOwnershipConflictError,
    DuplicateStudentCodeError,
    DuplicateUsernameError,
)
from src.school_portal.school_portal.main import create_app
from src.school_portal.school_portal.marks.model import MarkRecord, MarkRow
from src.school_portal.school_portal.students.model import Student
from src.school_portal.school_portal.subjects.model import Subject
from src.school_portal.school_portal.users.model import User

SUPERADMIN_PASSWORD = "root-pass"


class InMemoryUsers:
    def __init__(self):
        self.users: dict[int, User] = {}
        self._id = 0

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.username == username), None)

    def create_user(self, *, username: str, password_hash: str, role: Role) -> int:
        if self.get_by_username(username):
            raise DuplicateUsernameError(f"Username {username!r} is already taken")
        self._id += 1
        self.users[self._id] = User(user_id=self._id, username=username, password_hash=password_hash, role=role)
        return self._id

    def update_password(self, user_id: int, *, password_hash: str) -> bool:
        user = self.users.get(user_id)
        if not user:
            return False
        self.users[user_id] = User(user_id=user.user_id, username=user.username, password_hash=password_hash, role=user.role)
        return True

    def delete_by_id(self, user_id: int) -> bool:
        return self.users.pop(user_id, None) is not None


class InMemoryClasses:
    def __init__(self):
        self.classes: dict[int, SchoolClass] = {}
        self._id = 0

    def get_by_id(self, class_id: int) -> Optional[SchoolClass]:
        return self.classes.get(class_id)

    def list_all(self):
        return [self.classes[k] for k in sorted(self.classes)]

    def list_by_admin_id(self, admin_id: int):
        return [c for c in self.list_all() if c.admin_id == admin_id]

    def create_class(self, *, name: str, admin_id: int, admin_name: str) -> int:
        if self.list_by_admin_id(admin_id):
            raise ClassOwnershipConflictError(f"Admin {admin_name!r} already manages a class")
        self._id += 1
        self.classes[self._id] = SchoolClass(class_id=self._id, name=name, admin_id=admin_id, admin_name=admin_name)
        return self._id

    def delete_by_id(self, class_id: int) -> bool:
        return self.classes.pop(class_id, None) is not None


class InMemorySubjects:
    def __init__(self):
        self.subjects: dict[int, Subject] = {}
        self._id = 0

    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        return self.subjects.get(subject_id)

    def list_all(self):
        return [self.subjects[k] for k in sorted(self.subjects)]

    def create_subject(self, *, name: str, code: str) -> int:
        self._id += 1
        self.subjects[self._id] = Subject(subject_id=self._id, name=name, code=code)
        return self._id

    def delete_by_id(self, subject_id: int) -> bool:
        return self.subjects.pop(subject_id, None) is not None


class InMemoryStudents:
    def __init__(self):
        self.students: dict[int, Student] = {}
        self._id = 0

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self.students.get(student_id)

    def get_by_code(self, student_code: str) -> Optional[Student]:
        return next((s for s in self.students.values() if s.student_code == student_code), None)

    def list_by_class_id(self, class_id: int):
        return [self.students[k] for k in sorted(self.students) if self.students[k].class_id == class_id]

    def create_student(self, *, student_code, full_name, email, password_hash, class_id) -> int:
        if self.get_by_code(student_code):
            raise DuplicateStudentCodeError(f"Student ID {student_code!r} is already in use")
        self._id += 1
        self.students[self._id] = Student(
            student_id=self._id,
            student_code=student_code,
            full_name=full_name,
            email=email,
            password_hash=password_hash,
            class_id=class_id,
        )
        return self._id

    def delete_by_id(self, student_id: int) -> bool:
        return self.students.pop(student_id, None) is not None


class InMemoryAttendance:
    def __init__(self):
        self.records: dict[int, AttendanceRecord] = {}
        self._id = 0

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self.records.get(attendance_id)

    def create_record(self, *, student_id: int, attendance_date: date, status: AttendanceStatus) -> int:
        self._id += 1
        self.records[self._id] = AttendanceRecord(
            attendance_id=self._id,
            student_id=student_id,
            attendance_date=attendance_date,
            status=status,
        )
        return self._id

    def list_for_student(self, student_id: int):
        return [self.records[k] for k in sorted(self.records) if self.records[k].student_id == student_id]


class InMemoryMarks:
    def __init__(self, students: InMemoryStudents, subjects: InMemorySubjects):
        self.records: dict[int, MarkRecord] = {}
        self._id = 0
        self._students = students
        self._subjects = subjects

    def get_by_id(self, mark_id: int) -> Optional[MarkRecord]:
        return self.records.get(mark_id)

    def create_record(self, *, student_id: int, subject_id: int, mark: float) -> int:
        self._id += 1
        self.records[self._id] = MarkRecord(mark_id=self._id, student_id=student_id, subject_id=subject_id, mark=mark)
        return self._id

    def _to_row(self, m: MarkRecord) -> MarkRow:
        student = self._students.get_by_id(m.student_id)
        subject = self._subjects.get_by_id(m.subject_id)
        return MarkRow(
            mark_id=m.mark_id,
            student_id=m.student_id,
            subject_id=m.subject_id,
            mark=m.mark,
            student_code=student.student_code if student else None,
            full_name=student.full_name if student else None,
            subject_name=subject.name if subject else None,
            subject_code=subject.code if subject else None,
        )

    def list_for_student(self, student_id: int):
        return [self._to_row(self.records[k]) for k in sorted(self.records) if self.records[k].student_id == student_id]

    def list_for_class(self, class_id: int):
        rows = []
        for k in sorted(self.records):
            student = self._students.get_by_id(self.records[k].student_id)
            if student and student.class_id == class_id:
                rows.append(self._to_row(self.records[k]))
        return rows


@pytest.fixture
def container() -> Container:
    students = InMemoryStudents()
    subjects = InMemorySubjects()
    return wire_services(
        users_repo=InMemoryUsers(),
        classes_repo=InMemoryClasses(),
        subjects_repo=subjects,
        students_repo=students,
        attendance_repo=InMemoryAttendance(),
        marks_repo=InMemoryMarks(students, subjects),
    )


@pytest.fixture
def superadmin(container) -> Actor:
    user_id = container.users_repo.create_user(
        username="root",
        password_hash=generate_password_hash(SUPERADMIN_PASSWORD),
        role=Role.SUPERADMIN,
    )
    return Actor(role=Role.SUPERADMIN, actor_id=user_id)


@pytest.fixture
def make_class(container, superadmin):
    """Create a class with a fresh admin; returns (class, admin actor)."""

    def _make(name: str = "Class 7A", admin_username: str = "teacher7a"):
        created = container.class_service.create_class(
            superadmin,
            name=name,
            admin_username=admin_username,
            admin_password="secret123",
        )
        return created, Actor(role=Role.ADMIN, actor_id=created.admin_id)

    return _make


@pytest.fixture
def make_student(container):
    def _make(admin: Actor, code: str = "S-001", full_name: str = "Ana Lee"):
        student = container.student_service.create_student(
            admin,
            student_code=code,
            full_name=full_name,
            email=f"{code.lower()}@school.test",
            password="pupil123",
        )
        return student, Actor(role=Role.STUDENT, actor_id=student.student_id)

    return _make


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 3, 2)


@pytest.fixture
def app(container):
    return create_app(settings_module="config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()
