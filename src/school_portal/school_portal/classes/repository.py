from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SchoolClass


class ClassRepository(Protocol):
    def get_by_id(self, class_id: int) -> Optional[SchoolClass]:
        raise NotImplementedError

    def list_all(self) -> Sequence[SchoolClass]:
        raise NotImplementedError

    def list_by_admin_id(self, admin_id: int) -> Sequence[SchoolClass]:
        raise NotImplementedError

    def create_class(self, *, name: str, admin_id: int, admin_name: str) -> int:
        """Insert a class; raises ClassOwnershipConflictError if the admin already owns one."""

        raise NotImplementedError

    def delete_by_id(self, class_id: int) -> bool:
        raise NotImplementedError
