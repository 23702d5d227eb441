"""Financial aggregation rules behind the dashboard.

All amounts are `Decimal`; nothing here touches storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Tuple

from ..common.datetime_utils import add_months, start_of_day
from ..core.constants import WARNING_SALARY_FACTOR
from ..core.enums import FinancialStatus


@dataclass(frozen=True)
class LedgerTotals:
    """Raw figures gathered from the repositories for one snapshot."""

    total_customers: int
    monthly_income: Decimal
    total_income: Decimal
    total_expenses: Decimal
    total_salaries: Decimal
    expired_subscriptions: int


@dataclass(frozen=True)
class DashboardStats:
    total_customers: int
    monthly_income: Decimal
    expired_subscriptions: int
    current_inventory: Decimal
    total_salaries: Decimal
    financial_status: FinancialStatus


def month_bounds(today: date) -> Tuple[datetime, datetime]:
    """`[first day of month, first day of next month)` as datetimes."""
    first = today.replace(day=1)
    return start_of_day(first), start_of_day(add_months(first, 1))


def current_inventory(total_income: Decimal, total_expenses: Decimal) -> Decimal:
    # May go negative.
    return total_income - total_expenses


def classify_financial_status(inventory: Decimal, total_salaries: Decimal) -> FinancialStatus:
    if inventory < total_salaries:
        return FinancialStatus.CRITICAL
    if inventory < total_salaries * WARNING_SALARY_FACTOR:
        return FinancialStatus.WARNING
    return FinancialStatus.HEALTHY


def build_dashboard_stats(totals: LedgerTotals) -> DashboardStats:
    inventory = current_inventory(totals.total_income, totals.total_expenses)
    return DashboardStats(
        total_customers=totals.total_customers,
        monthly_income=totals.monthly_income,
        expired_subscriptions=totals.expired_subscriptions,
        current_inventory=inventory,
        total_salaries=totals.total_salaries,
        financial_status=classify_financial_status(inventory, totals.total_salaries),
    )
