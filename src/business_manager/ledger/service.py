from __future__ import annotations

import logging
from typing import Sequence

from ..activities.service import ActivityLog
from ..core.constants import CURRENCY_LABEL
from ..core.enums import ActivityType, IncomeType
from ..core.exceptions import InternalError, ValidationError
from ..customers.repository import CustomerRepository
from ..database.connection import TransactionManager
from .model import DateRange, ExpenseEntry, IncomeEntry, NewExpenseEntry, NewIncomeEntry
from .repository import ExpenseRepository, IncomeRepository

logger = logging.getLogger(__name__)


class LedgerService:
    """Income and expense bookkeeping. Entries are immutable once recorded."""

    def __init__(
        self,
        income: IncomeRepository,
        expenses: ExpenseRepository,
        customers: CustomerRepository,
        activity_log: ActivityLog,
        transactions: TransactionManager,
    ):
        self._income = income
        self._expenses = expenses
        self._customers = customers
        self._activity_log = activity_log
        self._tx = transactions

    def record_income(self, data: NewIncomeEntry) -> IncomeEntry:
        if data.type == IncomeType.PRINTS and not data.print_type:
            raise ValidationError("حقل نوع الطباعة مطلوب")
        print_type = data.print_type if data.type == IncomeType.PRINTS else None

        with self._tx.transaction():
            if data.customer_id is not None and not self._customers.get_by_id(data.customer_id):
                raise ValidationError("العميل غير موجود")

            income_id = self._income.create(
                type=data.type,
                amount=data.amount,
                print_type=print_type,
                customer_id=data.customer_id,
                receipt_url=data.receipt_url,
                description=data.description,
            )
            self._activity_log.record(
                ActivityType.INCOME_ADDED,
                f"تم تسجيل دخل بقيمة {data.amount} {CURRENCY_LABEL}",
                income_id,
            )
            entry = self._income.get_by_id(income_id)

        if not entry:
            raise InternalError("تعذر قراءة الدخل بعد تسجيله")
        logger.info("income %s recorded (%s, %s)", income_id, data.type.value, data.amount)
        return entry

    def record_expense(self, data: NewExpenseEntry) -> ExpenseEntry:
        with self._tx.transaction():
            expense_id = self._expenses.create(amount=data.amount, reason=data.reason, description=data.description)
            self._activity_log.record(
                ActivityType.EXPENSE_ADDED,
                f"تم تسجيل مصروف بقيمة {data.amount} {CURRENCY_LABEL} - {data.reason}",
                expense_id,
            )
            entry = self._expenses.get_by_id(expense_id)

        if not entry:
            raise InternalError("تعذر قراءة المصروف بعد تسجيله")
        logger.info("expense %s recorded (%s)", expense_id, data.amount)
        return entry

    def list_income(self, window: DateRange = DateRange()) -> Sequence[IncomeEntry]:
        return self._income.list_in_range(window)

    def list_expenses(self, window: DateRange = DateRange()) -> Sequence[ExpenseEntry]:
        return self._expenses.list_in_range(window)

    def list_print_income(self, window: DateRange = DateRange()) -> Sequence[IncomeEntry]:
        return self._income.list_in_range(window, type=IncomeType.PRINTS)
