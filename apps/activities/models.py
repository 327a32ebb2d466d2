"""activities/models.py

Activities live in the farm backend, not in a local database; these are the
in-memory records the calendar works with.
"""

from dataclasses import dataclass
from datetime import datetime


class ActivityStatus:
    ACTIVE = "ACTIVE"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    DEACTIVATED = "DEACTIVATED"

    ALL = (ACTIVE, IN_PROGRESS, COMPLETED, DEACTIVATED)


@dataclass(frozen=True)
class Activity:
    id: int | None
    activity_type: str
    start_date: str | None
    end_date: str | None
    status: str

    @classmethod
    def from_api(cls, payload):
        """Build from a backend JSON record (`farmActivitiesId`, `activityType`, ...)."""
        raw_id = payload.get("farmActivitiesId", payload.get("id"))
        try:
            activity_id = int(raw_id) if raw_id is not None else None
        except (TypeError, ValueError):
            activity_id = None

        activity_type = payload.get("activityType")
        return cls(
            id=activity_id,
            activity_type="" if activity_type is None else str(activity_type),
            start_date=payload.get("startDate") or None,
            end_date=payload.get("endDate") or None,
            status=payload.get("status") or "",
        )

    @property
    def normalized_status(self):
        return (self.status or "").upper()


@dataclass(frozen=True)
class CalendarEvent:
    title: str
    start: datetime
    end: datetime
    activity: Activity
    all_day: bool = True

    @property
    def activity_id(self):
        return self.activity.id
