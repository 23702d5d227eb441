from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Storage interface for users.

    Services depend on this Protocol, never on a concrete database class.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_external_id(self, external_id: str) -> Optional[User]:
        raise NotImplementedError

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
        raise NotImplementedError

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
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError
