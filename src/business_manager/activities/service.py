from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.constants import DEFAULT_ACTIVITY_LIMIT, MAX_ACTIVITY_LIMIT
from ..core.enums import ActivityType
from ..core.exceptions import ValidationError
from .model import Activity
from .repository import ActivityRepository

logger = logging.getLogger(__name__)


class ActivityLog:
    """Records domain events for the dashboard feed.

    Services call `record` inside their own transaction, so a failed append
    rolls back the write it describes.
    """

    def __init__(self, activities: ActivityRepository):
        self._activities = activities

    def record(self, activity_type: ActivityType, description: str, related_id: Optional[int] = None) -> int:
        activity_id = self._activities.add(type=activity_type, description=description, related_id=related_id)
        logger.info("activity %s related_id=%s", activity_type.value, related_id)
        return activity_id

    def recent(self, limit: int = DEFAULT_ACTIVITY_LIMIT) -> Sequence[Activity]:
        if limit < 1 or limit > MAX_ACTIVITY_LIMIT:
            raise ValidationError(f"قيمة limit يجب أن تكون بين 1 و {MAX_ACTIVITY_LIMIT}")
        return self._activities.list_recent(limit)
