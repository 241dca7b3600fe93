from __future__ import annotations

import pytest

from src.school_portal.school_portal.access.model import Actor
from src.school_portal.school_portal.classes.model import SchoolClass
from src.school_portal.school_portal.core.enums import Role
from src.school_portal.school_portal.core.exceptions import (
    AmbiguousOwnershipError,
    AuthorizationError,
    NotFoundError,
)


def test_resolve_owned_class(container, make_class):
    created, admin = make_class()

    assert container.access_control.resolve_owned_class(admin.actor_id).class_id == created.class_id


def test_resolve_owned_class_without_class_is_not_found(container):
    admin = container.user_service.create_admin(username="lonely", password="secret123")

    with pytest.raises(NotFoundError):
        container.access_control.resolve_owned_class(admin.user_id)


def test_resolve_owned_class_with_two_classes_is_ambiguous(container, make_class):
    created, admin = make_class()
    # Bypass the uniqueness check to simulate inconsistent storage.
    container.classes_repo.classes[99] = SchoolClass(class_id=99, name="Dup", admin_id=admin.actor_id, admin_name="x")

    with pytest.raises(AmbiguousOwnershipError):
        container.access_control.resolve_owned_class(admin.actor_id)


def test_student_may_only_access_self(container, make_class, make_student):
    _, admin = make_class()
    ana, ana_actor = make_student(admin, code="S-1")
    ben, _ = make_student(admin, code="S-2")

    assert container.access_control.authorize_student_access(ana_actor, ana.student_id) == ana
    with pytest.raises(AuthorizationError):
        container.access_control.authorize_student_access(ana_actor, ben.student_id)


def test_admin_may_only_access_own_class(container, make_class, make_student):
    _, admin_a = make_class(name="A", admin_username="a")
    _, admin_b = make_class(name="B", admin_username="b")
    student_b, _ = make_student(admin_b, code="S-B")

    assert container.access_control.authorize_student_access(admin_b, student_b.student_id) == student_b
    with pytest.raises(AuthorizationError):
        container.access_control.authorize_student_access(admin_a, student_b.student_id)


def test_missing_student_is_not_found(container, make_class):
    _, admin = make_class()

    with pytest.raises(NotFoundError):
        container.access_control.authorize_student_access(admin, 12345)


def test_superadmin_has_no_student_scope(container, make_class, make_student, superadmin):
    _, admin = make_class()
    student, _ = make_student(admin)

    with pytest.raises(AuthorizationError):
        container.access_control.authorize_student_access(superadmin, student.student_id)


def test_admin_without_class_cannot_access_students(container, make_class, make_student):
    _, admin = make_class()
    student, _ = make_student(admin)
    lonely = container.user_service.create_admin(username="lonely", password="secret123")

    with pytest.raises(NotFoundError):
        container.access_control.authorize_student_access(Actor(role=Role.ADMIN, actor_id=lonely.user_id), student.student_id)
