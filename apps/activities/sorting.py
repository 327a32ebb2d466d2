"""activities/sorting.py

Order of activity cards inside one day: overdue first, then status priority,
then earliest start. Python's sort is stable, so equal keys keep input order.
"""

from datetime import datetime

from .dates import parse_backend_date
from .models import ActivityStatus

STATUS_PRIORITY = {
    ActivityStatus.IN_PROGRESS: 0,
    ActivityStatus.ACTIVE: 1,
    ActivityStatus.COMPLETED: 2,
    ActivityStatus.DEACTIVATED: 3,
}
UNKNOWN_STATUS_PRIORITY = 99

# Unreadable start dates compare as the Unix epoch
EPOCH = datetime.fromtimestamp(0)


def activity_sort_key(activity, is_overdue):
    overdue = bool(is_overdue(activity)) if is_overdue else False
    priority = STATUS_PRIORITY.get(activity.normalized_status, UNKNOWN_STATUS_PRIORITY)
    start = parse_backend_date(activity.start_date) or EPOCH
    return (0 if overdue else 1, priority, start)


def sort_activities(activities, is_overdue=None):
    return sorted(activities, key=lambda a: activity_sort_key(a, is_overdue))


def sort_events(events, is_overdue=None):
    """Same order as sort_activities, applied to the events' activities."""
    return sorted(events, key=lambda e: activity_sort_key(e.activity, is_overdue))
