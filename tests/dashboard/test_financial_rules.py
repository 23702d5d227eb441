from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from business_manager.core.enums import FinancialStatus
from business_manager.dashboard.rules import (
    LedgerTotals,
    build_dashboard_stats,
    classify_financial_status,
    current_inventory,
    month_bounds,
)


def test_inventory_can_go_negative():
    assert current_inventory(Decimal("100"), Decimal("250.50")) == Decimal("-150.50")


def test_financial_status_thresholds():
    assert current_inventory(Decimal("1000"), Decimal("200")) == Decimal("800")
    assert classify_financial_status(Decimal("800"), Decimal("900")) is FinancialStatus.CRITICAL
    assert classify_financial_status(Decimal("800"), Decimal("600")) is FinancialStatus.WARNING
    assert classify_financial_status(Decimal("1000"), Decimal("600")) is FinancialStatus.HEALTHY


def test_financial_status_boundaries():
    # Equal to salaries is not critical; equal to 1.5x salaries is healthy.
    assert classify_financial_status(Decimal("600"), Decimal("600")) is FinancialStatus.WARNING
    assert classify_financial_status(Decimal("900"), Decimal("600")) is FinancialStatus.HEALTHY
    assert classify_financial_status(Decimal("0"), Decimal("0")) is FinancialStatus.HEALTHY


def test_month_bounds_cover_the_last_day():
    start, end = month_bounds(date(2025, 1, 31))
    assert start == datetime(2025, 1, 1)
    assert end == datetime(2025, 2, 1)

    start, end = month_bounds(date(2024, 12, 5))
    assert start == datetime(2024, 12, 1)
    assert end == datetime(2025, 1, 1)


def test_build_dashboard_stats():
    stats = build_dashboard_stats(
        LedgerTotals(
            total_customers=3,
            monthly_income=Decimal("150.00"),
            total_income=Decimal("1000.00"),
            total_expenses=Decimal("200.00"),
            total_salaries=Decimal("900.00"),
            expired_subscriptions=1,
        )
    )

    assert stats.current_inventory == Decimal("800.00")
    assert stats.financial_status is FinancialStatus.CRITICAL
    assert stats.total_customers == 3
    assert stats.expired_subscriptions == 1
