"""Helpers shared by the Flask controllers.

The session only remembers who logged in; every service call receives the
resulting ``Actor`` explicitly.
"""

from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, current_app, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..access.model import Actor
from ..core.enums import Role
from ..core.exceptions import (
    AmbiguousOwnershipError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Internal server error"

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
)


def login_actor(*, role: Role, actor_id: int) -> None:
    session.clear()
    session.permanent = True
    session["role"] = role.value
    session["actor_id"] = int(actor_id)


def current_actor() -> Actor:
    if "actor_id" not in session or "role" not in session:
        raise AuthenticationError("Please log in to continue")
    try:
        actor = Actor(role=Role(session["role"]), actor_id=int(session["actor_id"]))
    except (TypeError, ValueError):
        session.clear()
        raise AuthenticationError("Please log in to continue")

    try:
        current_app.extensions["school_portal"].auth_service.ensure_active(actor)
    except AuthenticationError:
        session.clear()
        raise
    return actor


def roles_required(*roles: Role):
    """Reject the request unless the logged-in actor has one of ``roles``."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            actor = current_actor()
            if actor.role not in roles:
                return jsonify({"error": "You do not have permission to perform this action"}), 403
            return view(actor, *args, **kwargs)

        return wrapper

    return decorator


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def message(text: str, status: int = 200):
    return jsonify({"message": text}), status


def status_for(error: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 500


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(error: DomainError):
        status = status_for(error)
        if status == 500:
            if isinstance(error, AmbiguousOwnershipError):
                logger.error("Ownership data is inconsistent: %s", error)
            else:
                logger.exception("Unhandled domain error")
            return jsonify({"error": GENERIC_SERVER_ERROR}), 500
        return jsonify({"error": str(error)}), status

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error: Exception):
        logger.exception("Unexpected error while handling %s %s", request.method, request.path)
        return jsonify({"error": GENERIC_SERVER_ERROR}), 500
