"""Role-based access policy.

The policy is a static table from operation to the set of roles allowed to
invoke it, plus a pure decision function. Nothing here knows where the
caller's role comes from: the claimed role is untrusted input supplied by the
HTTP layer (currently a request header), so a verified credential source can
be swapped in without touching ``decide``.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class Role(str, Enum):
    ADMIN = "admin"
    VET = "vet"


class Operation(str, Enum):
    OWNER_CREATE = "owner:create"
    OWNER_LIST = "owner:list"
    OWNER_READ = "owner:read"
    OWNER_UPDATE = "owner:update"
    OWNER_DELETE = "owner:delete"
    HORSE_CREATE = "horse:create"
    HORSE_LIST = "horse:list"
    HORSE_READ = "horse:read"
    HORSE_UPDATE = "horse:update"
    HORSE_UPDATE_HEALTH = "horse:update-health"
    HORSE_DELETE = "horse:delete"


_ADMIN_ONLY = frozenset({Role.ADMIN})
_ADMIN_AND_VET = frozenset({Role.ADMIN, Role.VET})

REQUIRED_ROLES: dict[Operation, frozenset[Role]] = {
    Operation.OWNER_CREATE: _ADMIN_ONLY,
    Operation.OWNER_LIST: _ADMIN_AND_VET,
    Operation.OWNER_READ: _ADMIN_AND_VET,
    Operation.OWNER_UPDATE: _ADMIN_ONLY,
    Operation.OWNER_DELETE: _ADMIN_ONLY,
    Operation.HORSE_CREATE: _ADMIN_ONLY,
    Operation.HORSE_LIST: _ADMIN_AND_VET,
    Operation.HORSE_READ: _ADMIN_AND_VET,
    Operation.HORSE_UPDATE: _ADMIN_ONLY,
    Operation.HORSE_UPDATE_HEALTH: _ADMIN_AND_VET,
    Operation.HORSE_DELETE: _ADMIN_ONLY,
}


def required_roles_for(operation: Operation) -> frozenset[Role]:
    """Roles declared for ``operation``; empty when the operation has no policy."""
    return REQUIRED_ROLES.get(operation, frozenset())


def parse_claimed_role(raw: str | None) -> Role | None:
    """Map an untrusted role token to a Role. Unknown or blank tokens count as absent."""
    if raw is None:
        return None
    try:
        return Role(raw.strip())
    except ValueError:
        return None


def decide(required_roles: Iterable[Role] | None, claimed_role: Role | None) -> bool:
    """Return True when the caller may proceed.

    Fails closed: an empty or missing ``required_roles`` denies everyone, and
    so does an absent ``claimed_role``.
    """
    allowed = frozenset(required_roles or ())
    if not allowed:
        return False
    if claimed_role is None:
        return False
    return claimed_role in allowed
