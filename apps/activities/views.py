"""activities/views.py"""

import logging
from datetime import date
from urllib.parse import urlencode

from django.conf import settings
from django.http import Http404
from django.urls import reverse
from django.views.generic import TemplateView

from .boards import DayBoard
from .dates import coerce_date, format_display_date, format_iso_day, format_long
from .due import activity_progress, days_until_due, is_activity_overdue
from .events import map_activities_to_events, map_activity_to_event
from .labels import ACTIVITY_TYPE_CHOICES, get_activity_type_label
from .locales import get_locale
from .models import ActivityStatus
from .navigation import NavigationController, ViewState, build_toolbar
from .services import ActivityServiceError, fetch_activities, filter_activities, get_activity
from .styles import STATUS_LABELS, event_style

logger = logging.getLogger(__name__)


class CalendarLinks:
    """URLs for the calendar's select / show-more / create / navigate actions."""

    def __init__(self, filters=None):
        self.filters = {k: v for k, v in (filters or {}).items() if v}

    def select_event(self, event):
        if event.activity.id is None:
            return None
        return reverse("activities:detail", args=[event.activity.id])

    def show_more(self, day):
        return reverse("activities:day", kwargs={"day": format_iso_day(day)})

    def select_slot(self, day):
        return f"{self.show_more(day)}?{urlencode({'create': 1})}"

    def navigate(self, d, granularity):
        params = {**ViewState(granularity, d).to_query(), **self.filters}
        return f"{reverse('activities:calendar')}?{urlencode(params)}"


class CalendarPageMixin:
    """Locale and activity loading shared by the calendar pages."""

    def get_calendar_locale(self):
        return get_locale(settings.CALENDAR_LOCALE)

    def load_activities(self):
        """Return (activities, error message or None); a failed load renders an empty calendar."""
        try:
            return fetch_activities(), None
        except ActivityServiceError as e:
            logger.error("Activity load failed: %s", e)
            return [], self.get_calendar_locale().message("load_error")

    def get_template_names(self):
        # HTMX requests get the bare partial for the drawer
        if self.request.headers.get("HX-Request") and getattr(self, "partial_template_name", None):
            return [self.partial_template_name]
        return super().get_template_names()


class ActivitiesCalendarView(CalendarPageMixin, TemplateView):
    template_name = "activities/calendar.html"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        locale = self.get_calendar_locale()

        status_filter = self.request.GET.get("status", "")
        type_filter = self.request.GET.get("type", "")

        state = ViewState.from_query(self.request.GET)
        controller = NavigationController(
            state,
            locale,
            month_max_events=settings.CALENDAR_MONTH_MAX_EVENTS,
            agenda_length=settings.CALENDAR_AGENDA_LENGTH,
        )

        activities, load_error = self.load_activities()
        activities = filter_activities(activities, status=status_filter, activity_type=type_filter)
        events = map_activities_to_events(activities, get_activity_type_label)

        links = CalendarLinks({"status": status_filter, "type": type_filter})
        board = controller.build(events, is_overdue=is_activity_overdue, links=links)

        ctx.update(
            {
                "state": controller.state,
                "board": board,
                "toolbar": build_toolbar(controller, links),
                "num_events": len(events),
                "num_dropped": len(activities) - len(events),
                "load_error": load_error,
                "status_filter": status_filter,
                "type_filter": type_filter,
                "status_choices": [(s, STATUS_LABELS[s]) for s in ActivityStatus.ALL],
                "type_choices": ACTIVITY_TYPE_CHOICES,
            }
        )
        return ctx


class DayActivitiesView(CalendarPageMixin, TemplateView):
    """Everything happening on one day: the "show more" / open-day drawer."""

    template_name = "activities/day.html"
    partial_template_name = "activities/partials/day_drawer.html"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        try:
            day = coerce_date(date.fromisoformat(kwargs["day"]))
        except ValueError:
            raise Http404("Invalid date")

        locale = self.get_calendar_locale()
        activities, load_error = self.load_activities()
        events = map_activities_to_events(activities, get_activity_type_label)

        board = DayBoard(locale)
        links = CalendarLinks()
        bucket = board.bucket(day, events, is_overdue=is_activity_overdue, links=links)

        ctx.update(
            {
                "day": day,
                "heading": format_long(day, locale),
                "bucket": bucket,
                "create": self.request.GET.get("create") == "1",
                "load_error": load_error,
                "calendar_url": links.navigate(day, DayBoard.granularity),
            }
        )
        return ctx


class ActivityDetailView(CalendarPageMixin, TemplateView):
    """A single activity: the select-event drawer."""

    template_name = "activities/detail.html"
    partial_template_name = "activities/partials/activity_detail.html"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        try:
            activity = get_activity(kwargs["pk"])
        except ActivityServiceError as e:
            logger.error("Activity load failed: %s", e)
            raise Http404("Activity source unavailable")

        if activity is None:
            raise Http404("Activity not found")

        overdue = is_activity_overdue(activity)
        event = map_activity_to_event(activity, get_activity_type_label)
        links = CalendarLinks()

        ctx.update(
            {
                "activity": activity,
                "event": event,
                "type_label": get_activity_type_label(activity.activity_type),
                "overdue": overdue,
                "style": event_style(activity, overdue, layer="badge"),
                "start_display": format_display_date(activity.start_date),
                "end_display": format_display_date(activity.end_date),
                "progress": activity_progress(activity),
                "days_until_due": days_until_due(activity),
                "day_url": links.show_more(event.start) if event else None,
            }
        )
        return ctx
