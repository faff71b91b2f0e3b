"""Roles, actions, principals and the permission table checked at the HTTP boundary."""

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    RESPONSABILE = "RESPONSABILE"
    WORKER = "WORKER"


class Action(str, Enum):
    TECHNICAL_SETTINGS = "technical_settings"
    VERIFY_PASSWORD = "verify_password"
    COMPANY_MANAGEMENT = "company_management"
    USER_MANAGEMENT = "user_management"
    PENDING_APPROVALS = "pending_approvals"


class WorkMode(str, Enum):
    """How an approver who also works shifts is operating for this request."""

    ADMIN = "admin"
    WORKER = "worker"


SUPER_ADMIN_ONLY = frozenset({Role.SUPER_ADMIN})
ADMIN_ROLES = frozenset({Role.ADMIN, Role.SUPER_ADMIN})
APPROVER_ROLES = frozenset({Role.SUPER_ADMIN, Role.ADMIN, Role.RESPONSABILE})

PERMISSIONS: dict[Action, frozenset[Role]] = {
    Action.TECHNICAL_SETTINGS: SUPER_ADMIN_ONLY,
    Action.VERIFY_PASSWORD: SUPER_ADMIN_ONLY,
    Action.COMPANY_MANAGEMENT: ADMIN_ROLES,
    Action.USER_MANAGEMENT: APPROVER_ROLES,
    Action.PENDING_APPROVALS: APPROVER_ROLES,
}


def is_allowed(role: Role, action: Action) -> bool:
    return role in PERMISSIONS[action]


@dataclass(frozen=True)
class Principal:
    """Identity and role of the caller for one request."""

    id: int
    role: Role
    is_worker: bool = False

    @property
    def is_approver(self) -> bool:
        return self.role in APPROVER_ROLES
