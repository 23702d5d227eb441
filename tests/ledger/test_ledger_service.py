from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from business_manager.core.enums import ActivityType, IncomeType, SubscriptionType
from business_manager.core.exceptions import ValidationError
from business_manager.ledger.forms import parse_date_range, parse_new_expense, parse_new_income
from business_manager.ledger.model import DateRange, NewExpenseEntry, NewIncomeEntry


def test_print_income_requires_print_type():
    with pytest.raises(ValidationError):
        parse_new_income({"type": "prints", "amount": "10"})

    data = parse_new_income({"type": "prints", "printType": "بطاقات", "amount": "10"})
    assert data.print_type == "بطاقات"
    assert data.amount == Decimal("10.00")


def test_print_type_is_dropped_for_subscription_income():
    data = parse_new_income({"type": "subscription", "printType": "flyers", "amount": 5, "customerId": "3"})

    assert data.print_type is None
    assert data.customer_id == 3


@pytest.mark.parametrize("amount", ["-1", "abc", "", None, True, "NaN", "1e20"])
def test_parse_income_rejects_bad_amounts(amount):
    with pytest.raises(ValidationError):
        parse_new_income({"type": "subscription", "amount": amount})


def test_parse_income_rejects_unknown_type():
    with pytest.raises(ValidationError):
        parse_new_income({"type": "donation", "amount": "1"})


def test_record_income_logs_amount(container, repos):
    entry = container.ledger_service.record_income(
        NewIncomeEntry(type=IncomeType.PRINTS, amount=Decimal("150.00"), print_type="flyers")
    )

    assert entry.print_type == "flyers"
    logged = repos.activities.of_type(ActivityType.INCOME_ADDED)
    assert logged[0].description == "تم تسجيل دخل بقيمة 150.00 د.ع"
    assert logged[0].related_id == entry.income_id


def test_record_income_service_enforces_print_type(container, repos):
    with pytest.raises(ValidationError):
        container.ledger_service.record_income(NewIncomeEntry(type=IncomeType.PRINTS, amount=Decimal("1")))
    assert repos.income.entries == {}


def test_record_income_checks_customer_reference(container, repos):
    with pytest.raises(ValidationError):
        container.ledger_service.record_income(
            NewIncomeEntry(type=IncomeType.SUBSCRIPTION, amount=Decimal("1"), customer_id=77)
        )

    customer_id = repos.customers.create(
        name="c",
        menu_url=None,
        join_date=date(2024, 1, 1),
        subscription_type=SubscriptionType.ANNUAL,
        expiry_date=date(2025, 1, 1),
    )
    entry = container.ledger_service.record_income(
        NewIncomeEntry(type=IncomeType.SUBSCRIPTION, amount=Decimal("1"), customer_id=customer_id)
    )
    assert entry.customer_id == customer_id


def test_record_expense_logs_reason(container, repos):
    entry = container.ledger_service.record_expense(NewExpenseEntry(amount=Decimal("20.50"), reason="ورق"))

    logged = repos.activities.of_type(ActivityType.EXPENSE_ADDED)
    assert logged[0].description == "تم تسجيل مصروف بقيمة 20.50 د.ع - ورق"
    assert logged[0].related_id == entry.expense_id


def test_parse_new_expense_requires_reason():
    with pytest.raises(ValidationError):
        parse_new_expense({"amount": "1"})


def test_date_range_end_is_inclusive():
    window = parse_date_range({"startDate": "2025-01-01", "endDate": "2025-01-31"})

    assert window.start == datetime(2025, 1, 1)
    assert window.end == datetime(2025, 2, 1)
    assert parse_date_range({}) == DateRange()
    assert parse_date_range({"endDate": "2025-01-31"}).start is None


def test_date_range_rejects_inverted_bounds():
    with pytest.raises(ValidationError):
        parse_date_range({"startDate": "2025-02-01", "endDate": "2025-01-31"})


def test_list_income_by_range_and_prints(container, repos):
    for when, income_type, print_type in [
        (datetime(2024, 12, 31, 12), IncomeType.PRINTS, "a"),
        (datetime(2025, 1, 31, 22), IncomeType.PRINTS, "b"),
        (datetime(2025, 1, 10, 9), IncomeType.SUBSCRIPTION, None),
    ]:
        repos.income.now = when
        repos.income.create(
            type=income_type,
            amount=Decimal("1"),
            print_type=print_type,
            customer_id=None,
            receipt_url=None,
            description=None,
        )

    january = container.ledger_service.list_income(parse_date_range({"startDate": "2025-01-01", "endDate": "2025-01-31"}))
    prints = container.ledger_service.list_print_income()

    assert [e.income_id for e in january] == [2, 3]
    assert [e.print_type for e in prints] == ["b", "a"]
