from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Optional, Sequence

import mysql.connector
from mysql.connector import errorcode

from ..core.enums import Role
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_COLUMNS = (
    "user_id, username, email, first_name, last_name, profile_image_url, external_id, "
    "password_hash, role, is_manual_user, created_at, updated_at"
)


def _row_to_user(row: Dict[str, Any]) -> User:
    return User(
        user_id=int(row["user_id"]),
        username=row.get("username"),
        email=row.get("email"),
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        profile_image_url=row.get("profile_image_url"),
        role=Role(row["role"]),
        is_manual_user=bool(row.get("is_manual_user", False)),
        password_hash=row.get("password_hash"),
        external_id=row.get("external_id"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


_DUPLICATE_MESSAGES = {
    "uq_users_username": "اسم المستخدم موجود بالفعل",
    "uq_users_email": "البريد الإلكتروني مستخدم بالفعل",
    "uq_users_external_id": "الحساب الخارجي مرتبط بمستخدم آخر",
}


@contextmanager
def _unique_violations():
    """Turn a duplicate-key error that slipped past the service checks into ConflictError."""
    try:
        yield
    except mysql.connector.IntegrityError as err:
        if err.errno != errorcode.ER_DUP_ENTRY:
            raise
        text = str(err.msg or "")
        for key, message in _DUPLICATE_MESSAGES.items():
            if key in text:
                raise ConflictError(message) from err
        raise ConflictError("القيمة مستخدمة بالفعل") from err


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_by(self, column: str, value: Any) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE {column}=%s", (value,))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._get_by("user_id", user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self._get_by("username", username)

    def get_by_email(self, email: str) -> Optional[User]:
        return self._get_by("email", email)

    def get_by_external_id(self, external_id: str) -> Optional[User]:
        return self._get_by("external_id", external_id)

    def create(
        self,
        *,
        username: Optional[str],
        email: Optional[str],
        first_name: Optional[str],
        last_name: Optional[str],
        profile_image_url: Optional[str],
        external_id: Optional[str],
        password_hash: Optional[str],
        role: Role,
        is_manual_user: bool,
    ) -> int:
        with _unique_violations(), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(username, email, first_name, last_name, profile_image_url,
                                  external_id, password_hash, role, is_manual_user)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    username,
                    email,
                    first_name,
                    last_name,
                    profile_image_url,
                    external_id,
                    password_hash,
                    role.value,
                    1 if is_manual_user else 0,
                ),
            )
            return int(cur.lastrowid)

    def update(
        self,
        user_id: int,
        *,
        username: Optional[str],
        email: Optional[str],
        first_name: Optional[str],
        last_name: Optional[str],
        profile_image_url: Optional[str],
        password_hash: Optional[str],
    ) -> bool:
        with _unique_violations(), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE users
                SET username=%s, email=%s, first_name=%s, last_name=%s,
                    profile_image_url=%s, password_hash=%s
                WHERE user_id=%s
                """,
                (username, email, first_name, last_name, profile_image_url, password_hash, user_id),
            )
            return cur.rowcount > 0

    def list_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users ORDER BY created_at DESC, user_id DESC")
            return [_row_to_user(r) for r in fetchall(cur)]
