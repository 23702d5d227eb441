from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    active = conn_factory.current()
    if active is not None:
        # Commit/rollback belong to the enclosing transaction.
        cur = active.cursor(dictionary=dictionary)
        try:
            yield active, cur
        finally:
            cur.close()
        return

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def to_decimal(value: Any) -> Decimal:
    """Normalize MySQL DECIMAL / SUM() results.

    mysql-connector returns DECIMAL as `Decimal`, but SUM over an empty set is
    NULL and the pure-Python driver may hand back strings or bytes.
    """

    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bytes):
        value = value.decode("ascii")
    if isinstance(value, float):
        value = repr(value)
    return Decimal(str(value))


def to_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return datetime.strptime(value[:10], "%Y-%m-%d").date()
    raise TypeError(f"Unsupported MySQL DATE value type: {type(value)!r}")


def where_clause(clauses: List[str]) -> str:
    return " AND ".join(clauses) if clauses else "1=1"
