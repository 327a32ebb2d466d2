"""activities/events.py"""

import logging

from .dates import end_of_day, is_valid_date, overlaps_day, parse_backend_date, start_of_day
from .models import CalendarEvent

logger = logging.getLogger(__name__)


def map_activity_to_event(activity, label_fn):
    """Project one activity onto an all-day calendar event, or None if its dates are unusable."""
    if not activity.start_date or not activity.end_date:
        return None

    start = parse_backend_date(activity.start_date)
    end = parse_backend_date(activity.end_date)
    if start is None or end is None:
        logger.debug(
            "Skipping activity %s: unreadable dates %r / %r",
            activity.id,
            activity.start_date,
            activity.end_date,
        )
        return None

    start = start_of_day(start)
    end = end_of_day(end)
    if end < start:
        end = end_of_day(start)

    return CalendarEvent(
        title=label_fn(activity.activity_type),
        start=start,
        end=end,
        activity=activity,
    )


def map_activities_to_events(activities, label_fn):
    """Calendar events for every activity with readable dates, in input order."""
    events = []
    for activity in activities:
        event = map_activity_to_event(activity, label_fn)
        if event is not None:
            events.append(event)
    return events


def event_occurs_on_day(event, day):
    """Occurrence test on the event's normalized (already clamped) bounds."""
    if not is_valid_date(day):
        return False
    return overlaps_day(event.start, event.end, day)
