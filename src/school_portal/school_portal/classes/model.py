from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SchoolClass:
    """Domain entity: a class managed by exactly one admin.

    ``admin_name`` is a snapshot of the admin's username taken at creation time;
    it is not updated if the admin account changes later.
    """

    class_id: int
    name: str
    admin_id: int
    admin_name: str

    def to_dict(self) -> dict:
        return {
            "id": self.class_id,
            "name": self.name,
            "adminId": self.admin_id,
            "adminName": self.admin_name,
        }
