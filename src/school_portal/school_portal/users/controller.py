from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.web import json_body, login_actor, message, roles_required
from ..container import Container
from ..core.enums import Role

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        login_actor(role=user.role, actor_id=user.user_id)
        logger.info("User %r logged in as %s", user.username, user.role.value)
        return jsonify({"data": user.to_public_dict()})

    @app.route("/student/login", methods=["POST"], endpoint="student_login")
    def student_login():
        data = json_body()
        student = container.auth_service.authenticate_student(data.get("studentId", ""), data.get("password", ""))
        login_actor(role=Role.STUDENT, actor_id=student.student_id)
        logger.info("Student %r logged in", student.student_code)
        return jsonify({"data": student.to_public_dict()})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return message("Logged out")

    @app.route("/admins/<int:user_id>", methods=["DELETE"], endpoint="delete_admin")
    @roles_required(Role.SUPERADMIN)
    def delete_admin(actor, user_id: int):
        container.user_service.delete_admin(actor, user_id=user_id)
        return message("Admin removed")

    @app.route("/admins/<int:user_id>", methods=["PUT"], endpoint="update_admin")
    @roles_required(Role.SUPERADMIN)
    def update_admin(actor, user_id: int):
        data = json_body()
        container.user_service.update_password(actor, user_id=user_id, new_password=data.get("password"))
        return message("Admin updated")
