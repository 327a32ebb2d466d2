"""activities/templatetags/activity_tags.py"""

from django import template
from django.utils.html import format_html

from activities.locales import VI
from activities.styles import OVERDUE_LABEL, inline_style, style_for

register = template.Library()

BADGE_SIZES = {
    "sm": {"padding": "2px 8px", "font_size": "10px"},
    "md": {"padding": "4px 12px", "font_size": "12px"},
    "lg": {"padding": "6px 16px", "font_size": "14px"},
}


@register.simple_tag
def status_badge(status, overdue=False, size="md"):
    """Rounded status pill coloured by the status style rules."""
    style = style_for(status, overdue)
    css = inline_style(style, border_radius="9999px", **BADGE_SIZES.get(size, BADGE_SIZES["md"]))
    return format_html('<span class="status-badge {}" style="{}">{}</span>', style.css_class, css, style.label)


@register.simple_tag
def overdue_marker(overdue):
    if not overdue:
        return ""
    return format_html('<div class="overdue-marker">{}</div>', OVERDUE_LABEL)


@register.simple_tag
def event_cell(card):
    """Month-grid entry: coloured bar with the title and a small status badge."""
    style = card["style"]
    activity = card["activity"]
    return format_html(
        '<a class="month-event {}" href="{}" style="{}" title="{}">'
        '<span class="month-event-title">{}</span>{}</a>',
        style.css_class,
        card["url"] or "#",
        inline_style(style),
        card["date_range"],
        card["title"],
        status_badge(activity.status, card["overdue"], size="sm"),
    )


@register.simple_tag(takes_context=True)
def calendar_message(context, key, **kwargs):
    """Localized calendar string, e.g. {% calendar_message "show_more" count=3 %}."""
    locale = context.get("calendar_locale") or VI
    return locale.message(key, **kwargs)
