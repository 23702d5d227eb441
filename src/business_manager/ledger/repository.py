from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import IncomeType
from .model import DateRange, ExpenseEntry, IncomeEntry


class IncomeRepository(Protocol):
    def create(
        self,
        *,
        type: IncomeType,
        amount: Decimal,
        print_type: Optional[str],
        customer_id: Optional[int],
        receipt_url: Optional[str],
        description: Optional[str],
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, income_id: int) -> Optional[IncomeEntry]:
        raise NotImplementedError

    def list_in_range(self, window: DateRange, *, type: Optional[IncomeType] = None) -> Sequence[IncomeEntry]:
        raise NotImplementedError

    def sum_in_range(self, window: DateRange, *, type: Optional[IncomeType] = None) -> Decimal:
        raise NotImplementedError


class ExpenseRepository(Protocol):
    def create(self, *, amount: Decimal, reason: str, description: Optional[str]) -> int:
        raise NotImplementedError

    def get_by_id(self, expense_id: int) -> Optional[ExpenseEntry]:
        raise NotImplementedError

    def list_in_range(self, window: DateRange) -> Sequence[ExpenseEntry]:
        raise NotImplementedError

    def sum_in_range(self, window: DateRange) -> Decimal:
        raise NotImplementedError
