from __future__ import annotations

import logging
from typing import Sequence

from ..activities.service import ActivityLog
from ..core.enums import ActivityType
from ..core.exceptions import InternalError, NotFoundError
from ..database.connection import TransactionManager
from .model import Employee, NewEmployee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, employees: EmployeeRepository, activity_log: ActivityLog, transactions: TransactionManager):
        self._employees = employees
        self._activity_log = activity_log
        self._tx = transactions

    def create_employee(self, data: NewEmployee) -> Employee:
        with self._tx.transaction():
            employee_id = self._employees.create(name=data.name, position=data.position, salary=data.salary)
            self._activity_log.record(
                ActivityType.EMPLOYEE_ADDED,
                f"تم إضافة موظف جديد: {data.name}",
                employee_id,
            )
            employee = self._employees.get_by_id(employee_id)

        if not employee:
            raise InternalError("تعذر قراءة الموظف بعد إنشائه")
        logger.info("employee %s created", employee_id)
        return employee

    def list_active(self) -> Sequence[Employee]:
        return self._employees.list_active()

    def remove_employee(self, employee_id: int) -> None:
        """Soft delete. Removing an already inactive employee is a no-op."""
        with self._tx.transaction():
            employee = self._employees.get_by_id(employee_id)
            if not employee:
                raise NotFoundError("الموظف غير موجود")
            if not self._employees.deactivate(employee_id):
                return
            self._activity_log.record(
                ActivityType.EMPLOYEE_REMOVED,
                f"تم إلغاء تفعيل الموظف: {employee.name}",
                employee_id,
            )
        logger.info("employee %s deactivated", employee_id)
