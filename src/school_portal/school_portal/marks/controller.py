from __future__ import annotations

from flask import Flask, jsonify

from ..common.validators import require_int_id
from ..common.web import json_body, roles_required
from ..container import Container
from ..core.enums import Role
from ..students.controller import target_student_id


def register(app: Flask, container: Container) -> None:
    @app.route("/marks", methods=["POST"], endpoint="record_mark")
    @roles_required(Role.ADMIN)
    def record_mark(actor):
        data = json_body()
        record = container.mark_service.record_mark(
            actor,
            student_id=require_int_id(data.get("studentId"), "studentId"),
            subject_id=data.get("subjectId"),
            mark=data.get("mark"),
        )
        return jsonify(record.to_dict()), 201

    @app.route("/marks", methods=["GET"], endpoint="list_marks")
    @roles_required(Role.ADMIN)
    def list_marks(actor):
        return jsonify([m.to_dict() for m in container.mark_service.list_class_marks(actor)])

    @app.route("/student/performance", methods=["GET"], endpoint="student_performance")
    @roles_required(Role.STUDENT, Role.ADMIN)
    def student_performance(actor):
        summary = container.student_report_service.performance_summary(actor, student_id=target_student_id(actor))
        return jsonify(summary.to_dict())
