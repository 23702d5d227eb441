from __future__ import annotations

from datetime import date

import pytest

from business_manager.core.enums import SubscriptionType
from business_manager.core.exceptions import InvalidSubscriptionType, ValidationError
from business_manager.customers.forms import parse_days, parse_new_customer


def test_parse_new_customer():
    data = parse_new_customer(
        {"name": "  مطعم  ", "menuUrl": "", "joinDate": "2024-01-15", "subscriptionType": "quarterly"}
    )

    assert data.name == "مطعم"
    assert data.menu_url is None
    assert data.join_date == date(2024, 1, 15)
    assert data.subscription_type is SubscriptionType.QUARTERLY


def test_parse_new_customer_ignores_client_expiry():
    data = parse_new_customer(
        {"name": "x", "joinDate": "2024-01-15", "subscriptionType": "annual", "expiryDate": "2030-01-01"}
    )
    assert not hasattr(data, "expiry_date")


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        {"joinDate": "2024-01-15", "subscriptionType": "annual"},
        {"name": "x", "joinDate": "15/01/2024", "subscriptionType": "annual"},
        {"name": "x", "joinDate": "2024-01-15"},
    ],
)
def test_parse_new_customer_rejects_bad_payloads(payload):
    with pytest.raises(ValidationError):
        parse_new_customer(payload)


def test_unknown_subscription_type_is_a_domain_failure():
    with pytest.raises(InvalidSubscriptionType):
        parse_new_customer({"name": "x", "joinDate": "2024-01-15", "subscriptionType": "weekly"})


def test_parse_days():
    assert parse_days("30") == 30
    with pytest.raises(ValidationError):
        parse_days("abc")
    with pytest.raises(ValidationError):
        parse_days("-5")
