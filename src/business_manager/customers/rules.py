"""Subscription lifecycle rules.

Pure functions over dates; nothing here touches storage or the clock.
"""

from __future__ import annotations

from datetime import date

from ..common.datetime_utils import add_months
from ..core.constants import EXPIRING_SOON_DAYS, RENEWAL_MONTHS
from ..core.enums import SubscriptionType
from ..core.exceptions import InvalidSubscriptionType, ValidationError

TERM_MONTHS = {
    SubscriptionType.ANNUAL: 12,
    SubscriptionType.SEMI_ANNUAL: 6,
    SubscriptionType.QUARTERLY: 3,
}


def _shift(value: date, months: int) -> date:
    try:
        return add_months(value, months)
    except (ValueError, OverflowError):
        # Past year 9999.
        raise ValidationError("تاريخ انتهاء الاشتراك خارج النطاق المسموح")


def compute_expiry(join_date: date, subscription_type: SubscriptionType | str) -> date:
    """Expiry for a new subscription starting on `join_date`.

    Month arithmetic clamps to the end of the month: Jan 31 + 3 months is
    Apr 30, and Feb 29 + 1 year is Feb 28.
    """
    try:
        cadence = SubscriptionType(subscription_type)
    except ValueError:
        raise InvalidSubscriptionType(f"نوع الاشتراك غير صحيح: {subscription_type}")
    return _shift(join_date, TERM_MONTHS[cadence])


def renewed_expiry(current_expiry: date) -> date:
    # Renewal always extends by one year, whatever the cadence.
    return _shift(current_expiry, RENEWAL_MONTHS)


def is_expired(expiry_date: date, today: date) -> bool:
    return expiry_date < today


def is_expiring_soon(expiry_date: date, today: date, *, window_days: int = EXPIRING_SOON_DAYS) -> bool:
    remaining = (expiry_date - today).days
    return 0 < remaining <= window_days
