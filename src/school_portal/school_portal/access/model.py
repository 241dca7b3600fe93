from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role
from ..core.exceptions import AuthorizationError


@dataclass(frozen=True)
class Actor:
    """The authenticated identity making a request.

    ``actor_id`` is a users.id for superadmin/admin and a students.id for students.
    """

    role: Role
    actor_id: int


def require_role(actor: Actor, *roles: Role) -> None:
    if actor.role not in roles:
        raise AuthorizationError("You do not have permission to perform this action")
