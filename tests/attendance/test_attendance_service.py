from __future__ import annotations

from datetime import date

import pytest

from src.school_portal.school_portal.core.enums import AttendanceStatus
from src.school_portal.school_portal.core.exceptions import (
    AuthorizationError,
    InvalidStatusError,
    NotFoundError,
)


def test_record_attendance_defaults_to_today(container, make_class, make_student, fixed_today, monkeypatch):
    monkeypatch.setattr(
        "src.school_portal.school_portal.attendance.service.today_local",
        lambda: fixed_today,
    )
    _, admin = make_class()
    student, _ = make_student(admin)

    record = container.attendance_service.record_attendance(admin, student_id=student.student_id, status="present")

    assert record.attendance_date == fixed_today
    assert record.status == AttendanceStatus.PRESENT
    assert record.student_id == student.student_id


def test_same_day_duplicates_are_appended(container, make_class, make_student):
    _, admin = make_class()
    student, _ = make_student(admin)
    day = date(2026, 3, 2)

    container.attendance_service.record_attendance(admin, student_id=student.student_id, status="present", on_date=day)
    container.attendance_service.record_attendance(admin, student_id=student.student_id, status="absent", on_date=day)

    records = container.attendance_repo.list_for_student(student.student_id)
    assert [r.status for r in records] == [AttendanceStatus.PRESENT, AttendanceStatus.ABSENT]


@pytest.mark.parametrize("status", ["late", "", None, "PRESENT", 1])
def test_invalid_status_is_rejected(container, make_class, make_student, status):
    _, admin = make_class()
    student, _ = make_student(admin)

    with pytest.raises(InvalidStatusError):
        container.attendance_service.record_attendance(admin, student_id=student.student_id, status=status)

    assert container.attendance_repo.list_for_student(student.student_id) == []


def test_cannot_take_attendance_for_other_class(container, make_class, make_student):
    _, admin_a = make_class(name="A", admin_username="a")
    _, admin_b = make_class(name="B", admin_username="b")
    student_b, _ = make_student(admin_b, code="S-B")

    with pytest.raises(AuthorizationError):
        container.attendance_service.record_attendance(admin_a, student_id=student_b.student_id, status="present")


def test_unknown_student_is_not_found(container, make_class):
    _, admin = make_class()

    with pytest.raises(NotFoundError):
        container.attendance_service.record_attendance(admin, student_id=404, status="absent")


def test_roster_lists_own_class_only(container, make_class, make_student):
    _, admin_a = make_class(name="A", admin_username="a")
    _, admin_b = make_class(name="B", admin_username="b")
    make_student(admin_a, code="S-A1")
    make_student(admin_a, code="S-A2")
    make_student(admin_b, code="S-B")

    assert [s.student_code for s in container.attendance_service.list_roster(admin_a)] == ["S-A1", "S-A2"]


def test_students_cannot_record_attendance(container, make_class, make_student):
    _, admin = make_class()
    student, student_actor = make_student(admin)

    with pytest.raises(AuthorizationError):
        container.attendance_service.record_attendance(student_actor, student_id=student.student_id, status="present")
