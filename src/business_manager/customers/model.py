from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import SubscriptionType


@dataclass(frozen=True)
class Customer:
    """A subscriber. `expiry_date` is derived from join date and cadence."""

    customer_id: int
    name: str
    menu_url: Optional[str]
    join_date: date
    subscription_type: SubscriptionType
    expiry_date: date
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class NewCustomer:
    name: str
    menu_url: Optional[str]
    join_date: date
    subscription_type: SubscriptionType
