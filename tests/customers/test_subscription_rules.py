from __future__ import annotations

from datetime import date

import pytest

from business_manager.core.enums import SubscriptionType
from business_manager.core.exceptions import InvalidSubscriptionType, ValidationError
from business_manager.customers.rules import compute_expiry, is_expired, is_expiring_soon, renewed_expiry


@pytest.mark.parametrize(
    "subscription_type, expected",
    [
        (SubscriptionType.ANNUAL, date(2025, 1, 15)),
        (SubscriptionType.SEMI_ANNUAL, date(2024, 7, 15)),
        (SubscriptionType.QUARTERLY, date(2024, 4, 15)),
    ],
)
def test_compute_expiry_offsets(subscription_type, expected):
    assert compute_expiry(date(2024, 1, 15), subscription_type) == expected


def test_compute_expiry_accepts_raw_values():
    assert compute_expiry(date(2024, 1, 15), "semi-annual") == date(2024, 7, 15)


def test_compute_expiry_clamps_to_month_end():
    assert compute_expiry(date(2024, 1, 31), SubscriptionType.QUARTERLY) == date(2024, 4, 30)
    assert compute_expiry(date(2024, 2, 29), SubscriptionType.ANNUAL) == date(2025, 2, 28)
    assert compute_expiry(date(2024, 8, 31), SubscriptionType.SEMI_ANNUAL) == date(2025, 2, 28)


def test_compute_expiry_rejects_unknown_cadence():
    with pytest.raises(InvalidSubscriptionType):
        compute_expiry(date(2024, 1, 15), "monthly")


def test_renewal_adds_one_year_whatever_the_cadence():
    assert renewed_expiry(date(2024, 6, 1)) == date(2025, 6, 1)
    assert renewed_expiry(date(2024, 2, 29)) == date(2025, 2, 28)


def test_expiry_classification():
    today = date(2025, 1, 1)

    assert is_expired(date(2024, 12, 31), today)
    assert not is_expiring_soon(date(2024, 12, 31), today)

    assert not is_expired(date(2025, 1, 1), today)
    assert not is_expiring_soon(date(2025, 1, 1), today)

    assert is_expiring_soon(date(2025, 1, 20), today)
    assert is_expiring_soon(date(2025, 1, 31), today)
    assert not is_expiring_soon(date(2025, 2, 1), today)
    assert not is_expired(date(2025, 2, 1), today)


def test_expiry_past_year_9999_is_a_validation_error():
    with pytest.raises(ValidationError):
        compute_expiry(date(9999, 6, 1), SubscriptionType.ANNUAL)
    with pytest.raises(ValidationError):
        renewed_expiry(date(9999, 1, 1))
    with pytest.raises(InvalidSubscriptionType):
        compute_expiry(date(9999, 6, 1), "weekly")

    assert compute_expiry(date(9999, 9, 30), SubscriptionType.QUARTERLY) == date(9999, 12, 30)
