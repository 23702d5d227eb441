from __future__ import annotations

import pytest

from business_manager.core.enums import Role
from business_manager.core.permissions import ROLE_PERMISSIONS, Permission, has_permission


@pytest.mark.parametrize(
    "permission",
    [Permission.VIEW_DASHBOARD, Permission.VIEW_ACTIVITIES, Permission.VIEW_CUSTOMERS, Permission.VIEW_REPORTS],
)
def test_every_role_can_view_the_basics(permission):
    for role in Role:
        assert has_permission(role, permission)


def test_viewer_is_read_only():
    for permission in (
        Permission.MANAGE_CUSTOMERS,
        Permission.MANAGE_LEDGER,
        Permission.MANAGE_EMPLOYEES,
        Permission.MANAGE_USERS,
        Permission.VIEW_LEDGER,
        Permission.VIEW_EMPLOYEES,
    ):
        assert not has_permission(Role.VIEWER, permission)


def test_editor_manages_business_data_but_not_users():
    assert has_permission(Role.EDITOR, Permission.MANAGE_CUSTOMERS)
    assert has_permission(Role.EDITOR, Permission.MANAGE_LEDGER)
    assert has_permission(Role.EDITOR, Permission.MANAGE_EMPLOYEES)
    assert not has_permission(Role.EDITOR, Permission.MANAGE_USERS)


def test_admin_has_everything():
    assert ROLE_PERMISSIONS[Role.ADMIN] == frozenset(Permission)


def test_unknown_or_missing_role_has_nothing():
    assert not has_permission(None, Permission.VIEW_DASHBOARD)
    assert not has_permission("owner", Permission.VIEW_DASHBOARD)
    assert has_permission("admin", Permission.MANAGE_USERS)
