from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_decimal
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, name, position, salary, is_active, created_at, updated_at"


def _row_to_employee(row: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(row["employee_id"]),
        name=row["name"],
        position=row.get("position"),
        salary=to_decimal(row["salary"]),
        is_active=bool(row.get("is_active", True)),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def create(self, *, name: str, position: Optional[str], salary: Decimal) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO employees(name, position, salary, is_active) VALUES(%s,%s,%s,1)",
                (name, position, salary),
            )
            return int(cur.lastrowid)

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE is_active=1 ORDER BY created_at DESC, employee_id DESC"
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def deactivate(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE employees SET is_active=0 WHERE employee_id=%s AND is_active=1", (employee_id,))
            return cur.rowcount > 0

    def sum_active_salaries(self) -> Decimal:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COALESCE(SUM(salary), 0) AS total FROM employees WHERE is_active=1")
            row = fetchone(cur)
            return to_decimal(row["total"] if row else None)
