"""activities/dates.py

Backend dates arrive either as legacy "M/D/YYYY" strings or as ISO-8601 text.
Everything here works on naive local datetimes and never raises: a value that
cannot be read becomes None, a display helper given None shows "now".
"""

import re
from datetime import date, datetime, time

from .locales import VI

# "2024" or "2024-01": first day of the year or month
REDUCED_ISO = re.compile(r"\d{4}(-\d{2})?")


def now():
    return datetime.now()


def coerce_date(value):
    """Return `value` as a datetime, or None if it is not a date at all."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    return None


def is_valid_date(value):
    return coerce_date(value) is not None


def format_iso_day(d):
    """YYYY-MM-DD with a zero-padded year, for URLs and query strings."""
    return coerce_date(d).date().isoformat()


def start_of_day(d):
    return datetime.combine(coerce_date(d).date(), time.min)


def end_of_day(d):
    return datetime.combine(coerce_date(d).date(), time.max)


# ── Parsing ──


def _parse_legacy(value):
    """month/day/year, 1-based month, local midnight."""
    parts = value.split("/")
    if len(parts) != 3:
        return None
    try:
        month, day, year = (int(p) for p in parts)
        if 0 <= year <= 99:
            year += 1900
        return datetime(year, month, day)
    except (ValueError, OverflowError):
        return None


def _parse_iso(value):
    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    if REDUCED_ISO.fullmatch(text):
        text = (text + "-01-01")[:10]
    try:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone().replace(tzinfo=None)
    except (ValueError, OverflowError):
        return None
    return parsed


def parse_backend_date(raw):
    """Normalize a backend date string to a local datetime, or None."""
    if isinstance(raw, (date, datetime)):
        return coerce_date(raw)
    if not raw or not isinstance(raw, str):
        return None

    if "/" in raw:
        parsed = _parse_legacy(raw)
        if parsed is not None:
            return parsed

    return _parse_iso(raw)


# ── Occurrence ──


def overlaps_day(start, end, day):
    return start <= end_of_day(day) and end >= start_of_day(day)


def occurs_on_day(start_raw, end_raw, day):
    """True if the [start, end] interval touches any part of `day`."""
    if not start_raw or not end_raw or not is_valid_date(day):
        return False

    start = parse_backend_date(start_raw)
    end = parse_backend_date(end_raw)
    if start is None or end is None:
        return False

    return overlaps_day(start, end, day)


# ── Display ──


def _valid_or_now(d):
    return coerce_date(d) or now()


def format_short(d, locale=VI):
    """Day-column header, e.g. "T4 17/01"."""
    d = _valid_or_now(d)
    return f"{locale.weekday_short(d)} {d:%d/%m}"


def format_long(d, locale=VI):
    """Day heading, e.g. "thứ tư, 17/01/2024"."""
    d = _valid_or_now(d)
    return f"{locale.weekday_name(d)}, {d:%d/%m/%Y}"


def format_date_range(start_raw, end_raw):
    start = parse_backend_date(start_raw)
    end = parse_backend_date(end_raw)
    if start is None or end is None:
        return ""
    return f"{start:%d/%m} → {end:%d/%m}"


def format_display_date(raw):
    """DD/MM/YYYY for detail panels, "-" when missing or unreadable."""
    parsed = parse_backend_date(raw)
    if parsed is None:
        return "-"
    return f"{parsed:%d/%m/%Y}"
