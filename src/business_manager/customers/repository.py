from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import SubscriptionType
from .model import Customer


class CustomerRepository(Protocol):
    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        menu_url: Optional[str],
        join_date: date,
        subscription_type: SubscriptionType,
        expiry_date: date,
    ) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[Customer]:
        raise NotImplementedError

    def update_subscription(self, customer_id: int, *, expiry_date: date, is_active: bool) -> bool:
        raise NotImplementedError

    def list_active_expiring_by(self, cutoff: date) -> Sequence[Customer]:
        """Active customers whose expiry is on or before `cutoff`."""
        raise NotImplementedError

    def count_active(self) -> int:
        raise NotImplementedError

    def count_active_expired(self, today: date) -> int:
        raise NotImplementedError
