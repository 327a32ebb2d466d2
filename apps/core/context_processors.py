# core/context_processors.py

from datetime import date

from django.conf import settings
from isoweek import Week

from activities.locales import get_locale


def calendar_context(request):
    """Add today, the current ISO week and the calendar locale to every template."""
    today = date.today()
    locale = get_locale(settings.CALENDAR_LOCALE)

    return {
        "today": today,
        "current_week": Week.withdate(today),
        "calendar_locale": locale,
        "calendar_messages": locale.messages,
    }
