"""Session and permission checks for API views.

Guards raise domain exceptions; `web.errors` turns them into JSON responses.
"""

from __future__ import annotations

from functools import wraps

from flask import session

from ..core.exceptions import AuthorizationError, UnauthorizedError
from ..core.permissions import Permission, has_permission


def current_user_id() -> int:
    user_id = session.get("user_id")
    if user_id is None:
        raise UnauthorizedError("غير مصرح")
    return int(user_id)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        current_user_id()
        return view(*args, **kwargs)

    return wrapper


def permission_required(permission: Permission):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            current_user_id()
            if not has_permission(session.get("role"), permission):
                raise AuthorizationError("ليس لديك صلاحية للقيام بهذا الإجراء")
            return view(*args, **kwargs)

        return wrapper

    return decorator
