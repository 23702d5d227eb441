from __future__ import annotations

from typing import Any, Tuple

from ..common.validators import optional_text, require_choice, require_mapping, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .model import NewManualUser, ProfileUpdate


def _password(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError("حقل كلمة المرور مطلوب")
    return require_min_length(value, "كلمة المرور", MIN_PASSWORD_LENGTH)


def parse_login(payload: Any) -> Tuple[str, str]:
    data = require_mapping(payload)
    username = require_non_empty(data.get("username"), "اسم المستخدم")
    password = data.get("password")
    if not isinstance(password, str) or not password:
        raise ValidationError("حقل كلمة المرور مطلوب")
    return username, password


def parse_new_manual_user(payload: Any) -> NewManualUser:
    data = require_mapping(payload)
    username = require_non_empty(data.get("username"), "اسم المستخدم")
    require_min_length(username, "اسم المستخدم", MIN_USERNAME_LENGTH)
    role = data.get("role")
    return NewManualUser(
        username=username,
        password=_password(data.get("password")),
        role=Role.VIEWER if role in (None, "") else require_choice(role, Role, "الصلاحية"),
        email=optional_text(data.get("email")),
        first_name=optional_text(data.get("firstName")),
        last_name=optional_text(data.get("lastName")),
    )


def parse_profile_update(payload: Any) -> ProfileUpdate:
    data = require_mapping(payload)

    username = None
    if data.get("username") not in (None, ""):
        username = require_non_empty(data.get("username"), "اسم المستخدم")
        require_min_length(username, "اسم المستخدم", MIN_USERNAME_LENGTH)

    password = None
    if data.get("password") not in (None, ""):
        password = _password(data.get("password"))

    return ProfileUpdate(
        first_name=optional_text(data.get("firstName")),
        last_name=optional_text(data.get("lastName")),
        email=optional_text(data.get("email")),
        username=username,
        password=password,
    )
