from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import SubscriptionType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_date
from .model import Customer
from .repository import CustomerRepository

_COLUMNS = "customer_id, name, menu_url, join_date, subscription_type, expiry_date, is_active, created_at, updated_at"


def _row_to_customer(row: Dict[str, Any]) -> Customer:
    return Customer(
        customer_id=int(row["customer_id"]),
        name=row["name"],
        menu_url=row.get("menu_url"),
        join_date=to_date(row["join_date"]),
        subscription_type=SubscriptionType(row["subscription_type"]),
        expiry_date=to_date(row["expiry_date"]),
        is_active=bool(row.get("is_active", True)),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLCustomerRepository(CustomerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM customers WHERE customer_id=%s", (customer_id,))
            row = fetchone(cur)
            return _row_to_customer(row) if row else None

    def create(
        self,
        *,
        name: str,
        menu_url: Optional[str],
        join_date: date,
        subscription_type: SubscriptionType,
        expiry_date: date,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO customers(name, menu_url, join_date, subscription_type, expiry_date, is_active)
                VALUES(%s,%s,%s,%s,%s,1)
                """,
                (name, menu_url, join_date, subscription_type.value, expiry_date),
            )
            return int(cur.lastrowid)

    def list_all(self) -> Sequence[Customer]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM customers ORDER BY created_at DESC, customer_id DESC")
            return [_row_to_customer(r) for r in fetchall(cur)]

    def update_subscription(self, customer_id: int, *, expiry_date: date, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE customers SET expiry_date=%s, is_active=%s WHERE customer_id=%s",
                (expiry_date, 1 if is_active else 0, customer_id),
            )
            return cur.rowcount > 0

    def list_active_expiring_by(self, cutoff: date) -> Sequence[Customer]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM customers
                WHERE is_active=1 AND expiry_date <= %s
                ORDER BY expiry_date ASC, customer_id ASC
                """,
                (cutoff,),
            )
            return [_row_to_customer(r) for r in fetchall(cur)]

    def count_active(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM customers WHERE is_active=1")
            row = fetchone(cur)
            return int(row["n"]) if row else 0

    def count_active_expired(self, today: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM customers WHERE is_active=1 AND expiry_date < %s", (today,))
            row = fetchone(cur)
            return int(row["n"]) if row else 0
