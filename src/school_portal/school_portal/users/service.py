from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..access.model import Actor, require_role
from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, DuplicateUsernameError, NotFoundError
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def _password_matches(password_hash: str, password) -> bool:
    if not isinstance(password, str):
        return False
    try:
        return check_password_hash(password_hash, password)
    except ValueError:
        # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
        return False


class AuthService:
    """Use case: authenticate an actor (login)."""

    def __init__(self, users: UserRepository, students: StudentRepository):
        self._users = users
        self._students = students

    def authenticate(self, username, password) -> User:
        if not isinstance(username, str):
            raise AuthenticationError(INVALID_CREDENTIALS)
        user = self._users.get_by_username(username.strip())
        if not user or not _password_matches(user.password_hash, password):
            raise AuthenticationError(INVALID_CREDENTIALS)
        return user

    def authenticate_student(self, student_code, password) -> Student:
        if not isinstance(student_code, str):
            raise AuthenticationError(INVALID_CREDENTIALS)
        student = self._students.get_by_code(student_code.strip())
        if not student or not _password_matches(student.password_hash, password):
            raise AuthenticationError(INVALID_CREDENTIALS)
        return student

    def ensure_active(self, actor: Actor) -> None:
        """Reject a remembered actor whose account was removed or changed role."""

        if actor.role == Role.STUDENT:
            active = self._students.get_by_id(actor.actor_id) is not None
        else:
            user = self._users.get_by_id(actor.actor_id)
            active = user is not None and user.role == actor.role
        if not active:
            raise AuthenticationError("Your account is no longer active, please log in again")


class UserService:
    """Use case: manage admin accounts (superadmin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def create_admin(self, *, username: str, password: str) -> User:
        username = require_non_empty(username, "Admin username")
        require_min_length(password, "Admin password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_username(username):
            raise DuplicateUsernameError(f"Username {username!r} is already taken")

        # The UNIQUE index still guards the race between the check and the insert.
        user_id = self._users.create_user(
            username=username,
            password_hash=generate_password_hash(password),
            role=Role.ADMIN,
        )
        logger.info("Created admin %r (id=%s)", username, user_id)
        return self._users.get_by_id(user_id)

    def _get_admin(self, user_id: int) -> User:
        user = self._users.get_by_id(int(user_id))
        if not user or user.role != Role.ADMIN:
            raise NotFoundError("Admin not found")
        return user

    def update_password(self, actor: Actor, *, user_id: int, new_password: str) -> None:
        require_role(actor, Role.SUPERADMIN)
        require_min_length(new_password, "Password", MIN_PASSWORD_LENGTH)

        user = self._get_admin(user_id)
        if not self._users.update_password(user.user_id, password_hash=generate_password_hash(new_password)):
            raise NotFoundError("Admin not found")
        logger.info("Password reset for admin id=%s", user.user_id)

    def delete_admin(self, actor: Actor, *, user_id: int) -> None:
        """Remove an admin account.

        The admin's class (if any) is left in place; it keeps its admin_name snapshot.
        """

        require_role(actor, Role.SUPERADMIN)

        user = self._get_admin(user_id)
        if not self._users.delete_by_id(user.user_id):
            raise NotFoundError("Admin not found")
        logger.info("Deleted admin %r (id=%s)", user.username, user.user_id)
