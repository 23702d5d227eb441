"""Role -> permission table.

The authorization policy lives here as data so it can be audited in one place.
The API guards only ever call `has_permission`.
"""

from __future__ import annotations

from enum import Enum

from .enums import Role


class Permission(str, Enum):
    VIEW_DASHBOARD = "view_dashboard"
    VIEW_ACTIVITIES = "view_activities"
    VIEW_CUSTOMERS = "view_customers"
    VIEW_REPORTS = "view_reports"
    VIEW_LEDGER = "view_ledger"
    VIEW_EMPLOYEES = "view_employees"
    MANAGE_CUSTOMERS = "manage_customers"
    MANAGE_LEDGER = "manage_ledger"
    MANAGE_EMPLOYEES = "manage_employees"
    MANAGE_USERS = "manage_users"


_VIEWER = frozenset(
    {
        Permission.VIEW_DASHBOARD,
        Permission.VIEW_ACTIVITIES,
        Permission.VIEW_CUSTOMERS,
        Permission.VIEW_REPORTS,
    }
)

_EDITOR = _VIEWER | frozenset(
    {
        Permission.VIEW_LEDGER,
        Permission.VIEW_EMPLOYEES,
        Permission.MANAGE_CUSTOMERS,
        Permission.MANAGE_LEDGER,
        Permission.MANAGE_EMPLOYEES,
    }
)

_ADMIN = frozenset(Permission)

ROLE_PERMISSIONS: dict[Role, frozenset[Permission]] = {
    Role.VIEWER: _VIEWER,
    Role.EDITOR: _EDITOR,
    Role.ADMIN: _ADMIN,
}


def permissions_for(role: Role) -> frozenset[Permission]:
    return ROLE_PERMISSIONS.get(role, frozenset())


def has_permission(role: Role | str | None, permission: Permission) -> bool:
    if role is None:
        return False
    try:
        role = Role(role)
    except ValueError:
        return False
    return permission in permissions_for(role)
