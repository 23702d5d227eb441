from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import ActivityType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Activity
from .repository import ActivityRepository


class MySQLActivityRepository(ActivityRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(self, *, type: ActivityType, description: str, related_id: Optional[int]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO activities(type, description, related_id) VALUES(%s,%s,%s)",
                (type.value, description, related_id),
            )
            return int(cur.lastrowid)

    def list_recent(self, limit: int) -> Sequence[Activity]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT activity_id, type, description, related_id, created_at
                FROM activities
                ORDER BY created_at DESC, activity_id DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [
                Activity(
                    activity_id=int(r["activity_id"]),
                    type=ActivityType(r["type"]),
                    description=r["description"],
                    related_id=int(r["related_id"]) if r.get("related_id") is not None else None,
                    created_at=r["created_at"],
                )
                for r in fetchall(cur)
            ]
