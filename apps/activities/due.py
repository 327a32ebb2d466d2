"""activities/due.py

Due-date policy: when an activity counts as overdue, how many days are left,
and how far through its date range it is.
"""

from .dates import coerce_date, now, parse_backend_date, start_of_day
from .models import ActivityStatus

CLOSED_STATUSES = {ActivityStatus.COMPLETED, ActivityStatus.DEACTIVATED}


def _today(today):
    return start_of_day(coerce_date(today) or now())


def is_activity_overdue(activity, today=None):
    """Past its end day and still open."""
    if activity.normalized_status in CLOSED_STATUSES:
        return False
    end = parse_backend_date(activity.end_date)
    if end is None:
        return False
    return start_of_day(end) < _today(today)


def days_until_due(activity, today=None):
    """Whole days until the end day (negative once overdue), None if unknown."""
    end = parse_backend_date(activity.end_date)
    if end is None:
        return None
    return (start_of_day(end) - _today(today)).days


def activity_progress(activity, today=None):
    """Percent of the activity's days that have started, 0-100."""
    if activity.normalized_status == ActivityStatus.COMPLETED:
        return 100

    start = parse_backend_date(activity.start_date)
    end = parse_backend_date(activity.end_date)
    if start is None or end is None:
        return 0

    start, end, day = start_of_day(start), start_of_day(end), _today(today)
    if day < start:
        return 0
    if day > end:
        return 100

    total_days = max((end - start).days + 1, 1)
    elapsed_days = (day - start).days + 1
    return min(100, round(elapsed_days * 100 / total_days))
