from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_body, message, roles_required
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    @app.route("/classes", methods=["POST"], endpoint="create_class")
    @roles_required(Role.SUPERADMIN)
    def create_class(actor):
        data = json_body()
        created = container.class_service.create_class(
            actor,
            name=data.get("name"),
            admin_username=data.get("adminUsername"),
            admin_password=data.get("adminPassword"),
        )
        return jsonify(created.to_dict()), 201

    @app.route("/classes", methods=["GET"], endpoint="list_classes")
    @roles_required(Role.SUPERADMIN)
    def list_classes(actor):
        return jsonify([c.to_dict() for c in container.class_service.list_classes(actor)])

    @app.route("/classes/<int:class_id>", methods=["DELETE"], endpoint="delete_class")
    @roles_required(Role.SUPERADMIN)
    def delete_class(actor, class_id: int):
        container.class_service.delete_class(actor, class_id=class_id)
        return message("Class deleted")
