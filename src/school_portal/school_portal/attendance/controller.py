from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_int_id
from ..common.web import json_body, roles_required
from ..container import Container
from ..core.enums import Role
from ..students.controller import target_student_id


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance", methods=["GET"], endpoint="attendance_roster")
    @roles_required(Role.ADMIN)
    def attendance_roster(actor):
        roster = container.attendance_service.list_roster(actor)
        return jsonify([s.to_public_dict() for s in roster])

    @app.route("/attendance", methods=["POST"], endpoint="record_attendance")
    @roles_required(Role.ADMIN)
    def record_attendance(actor):
        data = json_body()
        on_date = parse_iso_date(data["date"]) if data.get("date") else None
        record = container.attendance_service.record_attendance(
            actor,
            student_id=require_int_id(data.get("studentId"), "studentId"),
            status=data.get("status"),
            on_date=on_date,
        )
        return jsonify(record.to_dict()), 201

    @app.route("/student/attendance", methods=["GET"], endpoint="student_attendance")
    @roles_required(Role.STUDENT, Role.ADMIN)
    def student_attendance(actor):
        summary = container.student_report_service.attendance_summary(actor, student_id=target_student_id(actor))
        return jsonify(summary.to_dict())
