"""activities/ranges.py

Visible-day windows and prev/next/today arithmetic for each calendar
granularity. Weeks start on Monday (ISO weeks). Any input or result that is
not a usable date is replaced by "now" so the calendar always renders.
"""

import calendar
from datetime import datetime, time, timedelta

from isoweek import Week

from .dates import coerce_date, now, start_of_day
from .locales import VI

MONTH = "month"
WEEK = "week"
DAY = "day"
AGENDA = "agenda"
GRANULARITIES = (MONTH, WEEK, DAY, AGENDA)

PREV = "PREV"
NEXT = "NEXT"
TODAY = "TODAY"
DATE = "DATE"
ACTIONS = (PREV, NEXT, TODAY, DATE)

AGENDA_LENGTH = 30


def _valid_or_now(d):
    return coerce_date(d) or now()


def _midnights(days):
    return [datetime.combine(day, time.min) for day in days]


# ── Ranges ──


def range_week(d):
    """The 7 days (local midnight, Monday first) of the week containing `d`."""
    d = _valid_or_now(d)
    try:
        days = Week.withdate(d.date()).days()
    except (ValueError, OverflowError):
        # Last ISO week of year 9999 runs past date.max
        days = Week.withdate(now().date()).days()
    return _midnights(days)


def range_day(d):
    return [start_of_day(_valid_or_now(d))]


def month_weeks(d):
    """Monday-start weeks covering the month of `d`, as rows of 7 midnights."""
    d = _valid_or_now(d)
    cal = calendar.Calendar(firstweekday=calendar.MONDAY)
    try:
        weeks = cal.monthdatescalendar(d.year, d.month)
    except (ValueError, OverflowError):
        today = now()
        weeks = cal.monthdatescalendar(today.year, today.month)
    return [_midnights(week) for week in weeks]


def range_month(d):
    return [day for week in month_weeks(d) for day in week]


def range_agenda(d, length=AGENDA_LENGTH):
    first = start_of_day(_valid_or_now(d))
    try:
        return [first + timedelta(days=i) for i in range(length)]
    except OverflowError:
        first = start_of_day(now())
        return [first + timedelta(days=i) for i in range(length)]


# ── Navigation ──


def add_months(d, months):
    """Shift by whole calendar months, clamping the day to the month's end."""
    index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return d.replace(year=year, month=month, day=min(d.day, last_day))


def _shift(d, granularity, step, agenda_length):
    if granularity == WEEK:
        return d + timedelta(weeks=step)
    if granularity == DAY:
        return d + timedelta(days=step)
    if granularity == MONTH:
        return add_months(d, step)
    if granularity == AGENDA:
        return d + timedelta(days=step * agenda_length)
    return d


def navigate(d, action, granularity, agenda_length=AGENDA_LENGTH):
    """New anchor date after a PREV / NEXT / TODAY / DATE action."""
    if action == TODAY:
        return now()

    current = _valid_or_now(d)
    if action not in (PREV, NEXT):
        return current

    step = -1 if action == PREV else 1
    try:
        return _shift(current, granularity, step, agenda_length)
    except (ValueError, OverflowError):
        return now()


# ── Titles ──


def title(d, granularity, locale=VI, agenda_length=AGENDA_LENGTH):
    """Toolbar label for the window containing `d`."""
    d = _valid_or_now(d)
    if granularity == WEEK:
        days = range_week(d)
        return f"{days[0]:%d/%m} - {days[-1]:%d/%m/%Y}"
    if granularity == AGENDA:
        days = range_agenda(d, agenda_length)
        return f"{days[0]:%d/%m/%Y} - {days[-1]:%d/%m/%Y}"
    if granularity == DAY:
        return f"{locale.weekday_name(d)}, {d:%d/%m}"
    return f"{locale.month_name(d)} {d.year}"
