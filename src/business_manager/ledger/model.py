from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import IncomeType


@dataclass(frozen=True)
class IncomeEntry:
    income_id: int
    type: IncomeType
    print_type: Optional[str]
    amount: Decimal
    customer_id: Optional[int]
    receipt_url: Optional[str]
    description: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class ExpenseEntry:
    expense_id: int
    amount: Decimal
    reason: str
    description: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class NewIncomeEntry:
    type: IncomeType
    amount: Decimal
    print_type: Optional[str] = None
    customer_id: Optional[int] = None
    receipt_url: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class NewExpenseEntry:
    amount: Decimal
    reason: str
    description: Optional[str] = None


@dataclass(frozen=True)
class DateRange:
    """Half-open `[start, end)` window; either side may be open."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None
