from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..core.enums import IncomeType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_decimal, where_clause
from .model import DateRange, ExpenseEntry, IncomeEntry
from .repository import ExpenseRepository, IncomeRepository

_INCOME_COLUMNS = "income_id, type, print_type, amount, customer_id, receipt_url, description, created_at"
_EXPENSE_COLUMNS = "expense_id, amount, reason, description, created_at"


def _range_filters(window: DateRange) -> Tuple[List[str], List[Any]]:
    clauses: List[str] = []
    params: List[Any] = []
    if window.start is not None:
        clauses.append("created_at >= %s")
        params.append(window.start)
    if window.end is not None:
        clauses.append("created_at < %s")
        params.append(window.end)
    return clauses, params


def _row_to_income(row: Dict[str, Any]) -> IncomeEntry:
    return IncomeEntry(
        income_id=int(row["income_id"]),
        type=IncomeType(row["type"]),
        print_type=row.get("print_type"),
        amount=to_decimal(row["amount"]),
        customer_id=int(row["customer_id"]) if row.get("customer_id") is not None else None,
        receipt_url=row.get("receipt_url"),
        description=row.get("description"),
        created_at=row["created_at"],
    )


def _row_to_expense(row: Dict[str, Any]) -> ExpenseEntry:
    return ExpenseEntry(
        expense_id=int(row["expense_id"]),
        amount=to_decimal(row["amount"]),
        reason=row["reason"],
        description=row.get("description"),
        created_at=row["created_at"],
    )


class MySQLIncomeRepository(IncomeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO income_entries(type, print_type, amount, customer_id, receipt_url, description)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (type.value, print_type, amount, customer_id, receipt_url, description),
            )
            return int(cur.lastrowid)

    def get_by_id(self, income_id: int) -> Optional[IncomeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_INCOME_COLUMNS} FROM income_entries WHERE income_id=%s", (income_id,))
            row = fetchone(cur)
            return _row_to_income(row) if row else None

    def list_in_range(self, window: DateRange, *, type: Optional[IncomeType] = None) -> Sequence[IncomeEntry]:
        clauses, params = _range_filters(window)
        if type is not None:
            clauses.append("type = %s")
            params.append(type.value)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_INCOME_COLUMNS}
                FROM income_entries
                WHERE {where_clause(clauses)}
                ORDER BY created_at DESC, income_id DESC
                """,
                tuple(params),
            )
            return [_row_to_income(r) for r in fetchall(cur)]

    def sum_in_range(self, window: DateRange, *, type: Optional[IncomeType] = None) -> Decimal:
        clauses, params = _range_filters(window)
        if type is not None:
            clauses.append("type = %s")
            params.append(type.value)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT COALESCE(SUM(amount), 0) AS total FROM income_entries WHERE {where_clause(clauses)}",
                tuple(params),
            )
            row = fetchone(cur)
            return to_decimal(row["total"] if row else None)


class MySQLExpenseRepository(ExpenseRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, amount: Decimal, reason: str, description: Optional[str]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO expense_entries(amount, reason, description) VALUES(%s,%s,%s)",
                (amount, reason, description),
            )
            return int(cur.lastrowid)

    def get_by_id(self, expense_id: int) -> Optional[ExpenseEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_EXPENSE_COLUMNS} FROM expense_entries WHERE expense_id=%s", (expense_id,))
            row = fetchone(cur)
            return _row_to_expense(row) if row else None

    def list_in_range(self, window: DateRange) -> Sequence[ExpenseEntry]:
        clauses, params = _range_filters(window)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_EXPENSE_COLUMNS}
                FROM expense_entries
                WHERE {where_clause(clauses)}
                ORDER BY created_at DESC, expense_id DESC
                """,
                tuple(params),
            )
            return [_row_to_expense(r) for r in fetchall(cur)]

    def sum_in_range(self, window: DateRange) -> Decimal:
        clauses, params = _range_filters(window)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT COALESCE(SUM(amount), 0) AS total FROM expense_entries WHERE {where_clause(clauses)}",
                tuple(params),
            )
            row = fetchone(cur)
            return to_decimal(row["total"] if row else None)
