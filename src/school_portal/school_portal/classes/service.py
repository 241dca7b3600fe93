from __future__ import annotations

import logging
from typing import Sequence

from ..access.model import Actor, require_role
from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import NotFoundError
from ..users.model import User
from ..users.repository import UserRepository
from ..users.service import UserService
from .model import SchoolClass
from .repository import ClassRepository

logger = logging.getLogger(__name__)


class ClassService:
    """Use case: superadmin manages classes and their admins."""

    def __init__(self, classes: ClassRepository, users: UserRepository, user_service: UserService):
        self._classes = classes
        self._users = users
        self._user_service = user_service

    def create_class_for_admin(self, *, name: str, admin: User) -> SchoolClass:
        name = require_non_empty(name, "Class name")
        class_id = self._classes.create_class(name=name, admin_id=admin.user_id, admin_name=admin.username)
        logger.info("Created class %r (id=%s) for admin %r", name, class_id, admin.username)
        return self._classes.get_by_id(class_id)

    def create_class(self, actor: Actor, *, name: str, admin_username: str, admin_password: str) -> SchoolClass:
        require_role(actor, Role.SUPERADMIN)
        require_non_empty(name, "Class name")

        admin = self._user_service.create_admin(username=admin_username, password=admin_password)
        try:
            return self.create_class_for_admin(name=name, admin=admin)
        except Exception:
            # Do not leave an admin without the class it was created for.
            try:
                self._users.delete_by_id(admin.user_id)
            except Exception:
                logger.exception("Could not remove admin %r after failed class creation", admin.username)
            raise

    def list_classes(self, actor: Actor) -> Sequence[SchoolClass]:
        require_role(actor, Role.SUPERADMIN)
        return self._classes.list_all()

    def delete_class(self, actor: Actor, *, class_id: int) -> None:
        """Delete a class record only.

        Its admin account and its students stay in place (orphans remain
        retrievable by id).
        """

        require_role(actor, Role.SUPERADMIN)
        if not self._classes.delete_by_id(int(class_id)):
            raise NotFoundError("Class not found")
        logger.info("Deleted class id=%s", class_id)
