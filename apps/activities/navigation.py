"""activities/navigation.py

The calendar's only state is (granularity, anchor date). The controller
changes it through view switches and prev / next / today / jump actions, and
derives the toolbar label from it on every read.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime

from . import ranges
from .boards import get_strategy
from .dates import coerce_date, format_iso_day, now, parse_backend_date
from .locales import VI


@dataclass
class ViewState:
    granularity: str = ranges.MONTH
    anchor_date: datetime = field(default_factory=now)

    @classmethod
    def from_query(cls, params):
        """Read `?view=` and `?date=`; anything unusable falls back to month / now."""
        granularity = (params.get("view") or "").lower()
        if granularity not in ranges.GRANULARITIES:
            granularity = ranges.MONTH
        anchor = parse_backend_date(params.get("date")) or now()
        return cls(granularity=granularity, anchor_date=anchor)

    def to_query(self):
        return {"view": self.granularity, "date": format_iso_day(self.anchor_date)}


class NavigationController:
    def __init__(self, state=None, locale=VI, month_max_events=3, agenda_length=ranges.AGENDA_LENGTH):
        self.state = state or ViewState()
        self.locale = locale
        self.strategies = {
            g: get_strategy(
                g, locale, month_max_events=month_max_events, agenda_length=agenda_length
            )
            for g in ranges.GRANULARITIES
        }

    @property
    def granularity(self):
        return self.state.granularity

    @property
    def anchor_date(self):
        return self.state.anchor_date

    @property
    def strategy(self):
        return self.strategies[self.state.granularity]

    @property
    def label(self):
        return self.strategy.title(self.state.anchor_date)

    # ── Transitions ──

    def switch(self, granularity):
        if granularity not in self.strategies:
            raise ValueError(f"Unknown calendar view: {granularity!r}")
        self.state.granularity = granularity
        return self.state

    def prev(self):
        return self._apply(ranges.PREV)

    def next(self):
        return self._apply(ranges.NEXT)

    def today(self):
        return self._apply(ranges.TODAY)

    def jump(self, d):
        """Explicit date jump from a day cell or "show more"; keeps the granularity."""
        self.state.anchor_date = coerce_date(d) or now()
        return self.state

    def preview(self, action=None, granularity=None):
        """The state an action would produce, without applying it."""
        granularity = granularity or self.state.granularity
        anchor = self.state.anchor_date
        if action is not None:
            anchor = self.strategies[granularity].navigate(anchor, action)
        return replace(self.state, granularity=granularity, anchor_date=anchor)

    def _apply(self, action):
        self.state.anchor_date = self.strategy.navigate(self.state.anchor_date, action)
        return self.state

    # ── Rendering ──

    def build(self, events, is_overdue=None, links=None):
        return self.strategy.build(self.state.anchor_date, events, is_overdue, links)


@dataclass(frozen=True)
class Toolbar:
    label: str
    prev_url: str | None
    next_url: str | None
    today_url: str | None
    views: list


def build_toolbar(controller, links=None):
    """Label plus prev / next / today / view-switch targets for the active view."""

    def url_for(state):
        if links is None:
            return None
        return links.navigate(state.anchor_date, state.granularity)

    views = [
        {
            "granularity": g,
            "label": controller.locale.message(g),
            "url": url_for(controller.preview(granularity=g)),
            "active": g == controller.granularity,
        }
        for g in ranges.GRANULARITIES
    ]

    return Toolbar(
        label=controller.label,
        prev_url=url_for(controller.preview(ranges.PREV)),
        next_url=url_for(controller.preview(ranges.NEXT)),
        today_url=url_for(controller.preview(ranges.TODAY)),
        views=views,
    )
