"""activities/boards.py

Calendar views. Every view is a strategy with the same range / navigate /
title contract, so the toolbar drives any of them without knowing which one
is active. `build()` groups the events into day buckets for the template.
"""

from dataclasses import dataclass, field
from datetime import datetime

from . import ranges
from .dates import format_date_range, format_long, format_short, now
from .events import event_occurs_on_day
from .locales import VI
from .sorting import sort_events
from .styles import event_style


@dataclass
class DayBucket:
    day: datetime
    cards: list = field(default_factory=list)
    label: str = ""
    is_today: bool = False
    in_month: bool = True
    max_visible: int | None = None
    show_more_url: str | None = None
    create_url: str | None = None

    @property
    def events(self):
        return [card["event"] for card in self.cards]

    @property
    def count(self):
        return len(self.cards)

    @property
    def visible(self):
        if self.max_visible is None:
            return self.cards
        return self.cards[: self.max_visible]

    @property
    def overflow(self):
        return self.count - len(self.visible)


def _link(links, name, *args):
    if links is None:
        return None
    return getattr(links, name)(*args)


def event_card(event, is_overdue=None, links=None, layer="board"):
    """Display record for one activity card / month cell entry."""
    overdue = bool(is_overdue(event.activity)) if is_overdue else False
    return {
        "event": event,
        "activity": event.activity,
        "title": event.title,
        "overdue": overdue,
        "style": event_style(event.activity, overdue, layer=layer),
        "date_range": format_date_range(event.activity.start_date, event.activity.end_date),
        "url": _link(links, "select_event", event),
    }


class CalendarViewStrategy:
    """Base for the month / week / day / agenda views."""

    granularity = None
    template_name = None
    layer = "board"

    def __init__(self, locale=VI):
        self.locale = locale

    def range(self, d):
        raise NotImplementedError

    def navigate(self, d, action):
        return ranges.navigate(d, action, self.granularity)

    def title(self, d):
        return ranges.title(d, self.granularity, self.locale)

    def build(self, d, events, is_overdue=None, links=None):
        raise NotImplementedError

    def bucket(self, day, events, is_overdue=None, links=None):
        occurring = [e for e in events if event_occurs_on_day(e, day)]
        ordered = sort_events(occurring, is_overdue)
        return DayBucket(
            day=day,
            cards=[event_card(e, is_overdue, links, self.layer) for e in ordered],
            label=format_short(day, self.locale),
            is_today=day.date() == now().date(),
            show_more_url=_link(links, "show_more", day),
            create_url=_link(links, "select_slot", day),
        )

    def context(self, d, **extra):
        ctx = {
            "granularity": self.granularity,
            "template_name": self.template_name,
            "title": self.title(d),
            "anchor_date": d,
        }
        ctx.update(extra)
        return ctx


class WeekBoard(CalendarViewStrategy):
    """Seven day columns of sorted activity cards, Monday first."""

    granularity = ranges.WEEK
    template_name = "activities/partials/week_board.html"

    def range(self, d):
        return ranges.range_week(d)

    def build(self, d, events, is_overdue=None, links=None):
        buckets = [self.bucket(day, events, is_overdue, links) for day in self.range(d)]
        return self.context(d, buckets=buckets)


class DayBoard(CalendarViewStrategy):
    """One day as a vertical list, with a create prompt when empty."""

    granularity = ranges.DAY
    template_name = "activities/partials/day_board.html"

    def range(self, d):
        return ranges.range_day(d)

    def build(self, d, events, is_overdue=None, links=None):
        day = self.range(d)[0]
        bucket = self.bucket(day, events, is_overdue, links)
        return self.context(
            d,
            bucket=bucket,
            buckets=[bucket],
            heading=format_long(day, self.locale),
        )


class MonthView(CalendarViewStrategy):
    """Month grid from the stdlib calendar, with a "+N more" link per crowded cell."""

    granularity = ranges.MONTH
    template_name = "activities/partials/month_grid.html"
    layer = "month"

    def __init__(self, locale=VI, max_events=3):
        super().__init__(locale)
        self.max_events = max_events

    def range(self, d):
        return ranges.range_month(d)

    def build(self, d, events, is_overdue=None, links=None):
        anchor = ranges.range_day(d)[0]
        weeks = []
        for week in ranges.month_weeks(anchor):
            row = []
            for day in week:
                bucket = self.bucket(day, events, is_overdue, links)
                bucket.in_month = day.month == anchor.month
                bucket.max_visible = self.max_events
                row.append(bucket)
            weeks.append(row)

        return self.context(
            d,
            weeks=weeks,
            buckets=[bucket for row in weeks for bucket in row],
            weekday_headers=list(self.locale.weekdays),
        )


class AgendaView(CalendarViewStrategy):
    """Consecutive days that have activities, listed top to bottom."""

    granularity = ranges.AGENDA
    template_name = "activities/partials/agenda.html"

    def __init__(self, locale=VI, length=ranges.AGENDA_LENGTH):
        super().__init__(locale)
        self.length = length

    def range(self, d):
        return ranges.range_agenda(d, self.length)

    def navigate(self, d, action):
        return ranges.navigate(d, action, self.granularity, agenda_length=self.length)

    def title(self, d):
        return ranges.title(d, self.granularity, self.locale, agenda_length=self.length)

    def build(self, d, events, is_overdue=None, links=None):
        buckets = [self.bucket(day, events, is_overdue, links) for day in self.range(d)]
        return self.context(d, buckets=[b for b in buckets if b.cards])


def get_strategy(granularity, locale=VI, month_max_events=3, agenda_length=ranges.AGENDA_LENGTH):
    if granularity == ranges.MONTH:
        return MonthView(locale, max_events=month_max_events)
    if granularity == ranges.WEEK:
        return WeekBoard(locale)
    if granularity == ranges.DAY:
        return DayBoard(locale)
    if granularity == ranges.AGENDA:
        return AgendaView(locale, length=agenda_length)
    raise ValueError(f"Unknown calendar view: {granularity!r}")
