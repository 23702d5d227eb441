from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import ActivityType
from .model import Activity


class ActivityRepository(Protocol):
    """Append-only store: no update or delete."""

    def add(self, *, type: ActivityType, description: str, related_id: Optional[int]) -> int:
        raise NotImplementedError

    def list_recent(self, limit: int) -> Sequence[Activity]:
        raise NotImplementedError
