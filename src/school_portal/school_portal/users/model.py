from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a login identity for superadmin and admin actors.

    Note: Plain data object (no DB access code).
    """

    user_id: int
    username: str
    password_hash: str
    role: Role

    def to_public_dict(self) -> dict:
        return {"id": self.user_id, "username": self.username, "role": self.role.value}
