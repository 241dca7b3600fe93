from __future__ import annotations

from flask import Flask, jsonify, request

from ..access.model import Actor
from ..common.validators import require_int_id
from ..common.web import json_body, message, roles_required
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError


def target_student_id(actor: Actor) -> int:
    """Student whose data a /student/* request is about.

    Students default to themselves; admins must name a student with ``?id=``.
    Either way the service layer still checks access.
    """

    raw = request.args.get("id")
    if raw is not None:
        return require_int_id(raw, "id")
    if actor.role == Role.STUDENT:
        return actor.actor_id
    raise ValidationError("The id query parameter is required")


def register(app: Flask, container: Container) -> None:
    @app.route("/students", methods=["POST"], endpoint="create_student")
    @roles_required(Role.ADMIN)
    def create_student(actor):
        data = json_body()
        student = container.student_service.create_student(
            actor,
            student_code=data.get("studentId"),
            full_name=data.get("fullName"),
            email=data.get("email"),
            password=data.get("password"),
        )
        return jsonify(student.to_public_dict()), 201

    @app.route("/students", methods=["GET"], endpoint="list_students")
    @roles_required(Role.ADMIN)
    def list_students(actor):
        return jsonify([s.to_public_dict() for s in container.student_service.list_students(actor)])

    @app.route("/students/<int:student_id>", methods=["DELETE"], endpoint="delete_student")
    @roles_required(Role.ADMIN)
    def delete_student(actor, student_id: int):
        container.student_service.delete_student(actor, student_id=student_id)
        return message("Student deleted")

    @app.route("/student/info", methods=["GET"], endpoint="student_info")
    @roles_required(Role.STUDENT, Role.ADMIN)
    def student_info(actor):
        student = container.student_service.get_student(actor, student_id=target_student_id(actor))
        return jsonify(student.to_public_dict())
