from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, *, name: str, position: Optional[str], salary: Decimal) -> int:
        raise NotImplementedError

    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError

    def deactivate(self, employee_id: int) -> bool:
        """Returns True only when an active row was switched off."""
        raise NotImplementedError

    def sum_active_salaries(self) -> Decimal:
        raise NotImplementedError
