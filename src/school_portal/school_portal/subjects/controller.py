from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_body, message, roles_required
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    @app.route("/subjects", methods=["POST"], endpoint="create_subject")
    @roles_required(Role.SUPERADMIN)
    def create_subject(actor):
        data = json_body()
        subject = container.subject_service.create_subject(actor, name=data.get("name"), code=data.get("code"))
        return jsonify(subject.to_dict()), 201

    @app.route("/subjects", methods=["GET"], endpoint="list_subjects")
    @roles_required(Role.SUPERADMIN, Role.ADMIN)
    def list_subjects(actor):
        return jsonify([s.to_dict() for s in container.subject_service.list_subjects(actor)])

    @app.route("/subjects/<int:subject_id>", methods=["DELETE"], endpoint="delete_subject")
    @roles_required(Role.SUPERADMIN)
    def delete_subject(actor, subject_id: int):
        container.subject_service.delete_subject(actor, subject_id=subject_id)
        return message("Subject deleted")
