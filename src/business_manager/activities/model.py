from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import ActivityType


@dataclass(frozen=True)
class Activity:
    """One entry of the append-only activity feed."""

    activity_id: int
    type: ActivityType
    description: str
    related_id: Optional[int]
    created_at: datetime
