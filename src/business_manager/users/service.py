from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..activities.service import ActivityLog
from ..common.validators import require_min_length
from ..core.constants import MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH
from ..core.enums import ActivityType, Role
from ..core.exceptions import AuthenticationError, ConflictError, InternalError, NotFoundError, ValidationError
from ..database.connection import TransactionManager
from .model import ExternalIdentity, NewManualUser, ProfileUpdate, User
from .repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "اسم المستخدم أو كلمة المرور غير صحيحة"


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    username: str
    role: Role


class AuthService:
    """Use case: authenticate a manual user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        user = self._users.get_by_username(username)
        if not user or not user.is_manual_user or not user.password_hash:
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(user.password_hash, password)
        except (ValueError, TypeError):
            # Corrupted or placeholder hash.
            ok = False

        if not ok:
            logger.info("failed login for %s", username)
            raise AuthenticationError(INVALID_CREDENTIALS)

        return SessionUser(user_id=user.user_id, username=user.username, role=user.role)


class UserService:
    """Use case: manage accounts and profiles."""

    def __init__(self, users: UserRepository, activity_log: ActivityLog, transactions: TransactionManager):
        self._users = users
        self._activity_log = activity_log
        self._tx = transactions

    def get_user(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("المستخدم غير موجود")
        return user

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    def _ensure_username_free(self, username: str, *, user_id: Optional[int] = None) -> None:
        existing = self._users.get_by_username(username)
        if existing and existing.user_id != user_id:
            raise ConflictError("اسم المستخدم موجود بالفعل")

    def _ensure_email_free(self, email: str, *, user_id: Optional[int] = None) -> None:
        existing = self._users.get_by_email(email)
        if existing and existing.user_id != user_id:
            raise ConflictError("البريد الإلكتروني مستخدم بالفعل")

    def create_manual_user(self, data: NewManualUser) -> User:
        require_min_length(data.username, "اسم المستخدم", MIN_USERNAME_LENGTH)
        require_min_length(data.password, "كلمة المرور", MIN_PASSWORD_LENGTH)

        with self._tx.transaction():
            self._ensure_username_free(data.username)
            if data.email:
                self._ensure_email_free(data.email)

            user_id = self._users.create(
                username=data.username,
                email=data.email,
                first_name=data.first_name,
                last_name=data.last_name,
                profile_image_url=None,
                external_id=None,
                password_hash=generate_password_hash(data.password),
                role=data.role,
                is_manual_user=True,
            )
            self._activity_log.record(
                ActivityType.USER_CREATED,
                f"تم إنشاء حساب مستخدم جديد: {data.username}",
                user_id,
            )
            user = self._users.get_by_id(user_id)

        if not user:
            raise InternalError("تعذر قراءة المستخدم بعد إنشائه")
        logger.info("user %s (%s) created with role %s", user_id, data.username, data.role.value)
        return user

    def update_profile(self, user_id: int, changes: ProfileUpdate) -> User:
        with self._tx.transaction():
            user = self.get_user(user_id)

            username = user.username
            if changes.username is not None and changes.username != user.username:
                require_min_length(changes.username, "اسم المستخدم", MIN_USERNAME_LENGTH)
                self._ensure_username_free(changes.username, user_id=user_id)
                username = changes.username

            email = user.email
            if changes.email is not None and changes.email != user.email:
                self._ensure_email_free(changes.email, user_id=user_id)
                email = changes.email

            password_hash = user.password_hash
            if changes.password is not None:
                if not user.is_manual_user:
                    raise ValidationError("لا يمكن تعيين كلمة مرور لحساب خارجي")
                require_min_length(changes.password, "كلمة المرور", MIN_PASSWORD_LENGTH)
                password_hash = generate_password_hash(changes.password)

            self._users.update(
                user_id,
                username=username,
                email=email,
                first_name=changes.first_name if changes.first_name is not None else user.first_name,
                last_name=changes.last_name if changes.last_name is not None else user.last_name,
                profile_image_url=user.profile_image_url,
                password_hash=password_hash,
            )
            updated = self.get_user(user_id)

        logger.info("user %s updated profile (password changed: %s)", user_id, changes.password is not None)
        return updated

    def upsert_external_user(self, identity: ExternalIdentity) -> User:
        """Provision or refresh an identity authenticated by an outside provider.

        This is the entry point for external sign-in: whatever callback
        verifies the provider's token calls it with the claims and then puts
        the returned user's id and role into the session, as `/api/login`
        does for manual users. No provider is wired into this app; new
        identities start as viewers and never carry a password.
        """
        with self._tx.transaction():
            existing = self._users.get_by_external_id(identity.external_id)
            if identity.email:
                self._ensure_email_free(identity.email, user_id=existing.user_id if existing else None)

            if existing:
                self._users.update(
                    existing.user_id,
                    username=existing.username,
                    email=identity.email,
                    first_name=identity.first_name,
                    last_name=identity.last_name,
                    profile_image_url=identity.profile_image_url,
                    password_hash=None,
                )
                return self.get_user(existing.user_id)

            user_id = self._users.create(
                username=None,
                email=identity.email,
                first_name=identity.first_name,
                last_name=identity.last_name,
                profile_image_url=identity.profile_image_url,
                external_id=identity.external_id,
                password_hash=None,
                role=Role.VIEWER,
                is_manual_user=False,
            )
            user = self.get_user(user_id)

        logger.info("external user %s provisioned as %s", identity.external_id, user_id)
        return user
