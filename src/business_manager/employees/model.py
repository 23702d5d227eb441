from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Employee:
    employee_id: int
    name: str
    position: Optional[str]
    salary: Decimal
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class NewEmployee:
    name: str
    salary: Decimal
    position: Optional[str] = None
