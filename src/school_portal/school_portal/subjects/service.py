from __future__ import annotations

import logging
from typing import Sequence

from ..access.model import Actor, require_role
from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import NotFoundError
from .model import Subject
from .repository import SubjectRepository

logger = logging.getLogger(__name__)


class SubjectService:
    """Use case: global subject catalogue."""

    def __init__(self, subjects: SubjectRepository):
        self._subjects = subjects

    def create_subject(self, actor: Actor, *, name: str, code: str) -> Subject:
        require_role(actor, Role.SUPERADMIN)
        name = require_non_empty(name, "Subject name")
        code = require_non_empty(code, "Subject code")

        subject_id = self._subjects.create_subject(name=name, code=code)
        logger.info("Created subject %s (id=%s)", code, subject_id)
        return self._subjects.get_by_id(subject_id)

    def list_subjects(self, actor: Actor) -> Sequence[Subject]:
        # Admins need the catalogue to post marks.
        require_role(actor, Role.SUPERADMIN, Role.ADMIN)
        return self._subjects.list_all()

    def delete_subject(self, actor: Actor, *, subject_id: int) -> None:
        require_role(actor, Role.SUPERADMIN)
        if not self._subjects.delete_by_id(int(subject_id)):
            raise NotFoundError("Subject not found")
        logger.info("Deleted subject id=%s", subject_id)
