from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import today_local
from ..customers.repository import CustomerRepository
from ..employees.repository import EmployeeRepository
from ..ledger.model import DateRange
from ..ledger.repository import ExpenseRepository, IncomeRepository
from .rules import DashboardStats, LedgerTotals, build_dashboard_stats, month_bounds


class DashboardService:
    def __init__(
        self,
        customers: CustomerRepository,
        income: IncomeRepository,
        expenses: ExpenseRepository,
        employees: EmployeeRepository,
    ):
        self._customers = customers
        self._income = income
        self._expenses = expenses
        self._employees = employees

    def totals(self, today: Optional[date] = None) -> LedgerTotals:
        today = today or today_local()
        start, end = month_bounds(today)
        return LedgerTotals(
            total_customers=self._customers.count_active(),
            monthly_income=self._income.sum_in_range(DateRange(start=start, end=end)),
            total_income=self._income.sum_in_range(DateRange()),
            total_expenses=self._expenses.sum_in_range(DateRange()),
            total_salaries=self._employees.sum_active_salaries(),
            expired_subscriptions=self._customers.count_active_expired(today),
        )

    def snapshot(self, today: Optional[date] = None) -> DashboardStats:
        return build_dashboard_stats(self.totals(today))
