from datetime import date, datetime, time

import pytest

from activities.dates import (
    coerce_date,
    end_of_day,
    format_date_range,
    format_display_date,
    format_iso_day,
    format_long,
    format_short,
    occurs_on_day,
    parse_backend_date,
    start_of_day,
)
from activities.locales import EN


class TestParseBackendDate:
    def test_legacy_month_day_year(self):
        assert parse_backend_date("1/17/2024") == datetime(2024, 1, 17)

    def test_legacy_single_digits(self):
        assert parse_backend_date("3/5/2024") == datetime(2024, 3, 5)

    def test_iso_date(self):
        assert parse_backend_date("2024-01-17") == datetime(2024, 1, 17)

    def test_iso_datetime(self):
        assert parse_backend_date("2024-01-17T08:30:00") == datetime(2024, 1, 17, 8, 30)

    def test_iso_with_zone_is_naive_local(self):
        parsed = parse_backend_date("2024-01-17T08:30:00Z")
        assert parsed is not None
        assert parsed.tzinfo is None

    def test_date_object(self):
        assert parse_backend_date(date(2024, 1, 17)) == datetime(2024, 1, 17)

    @pytest.mark.parametrize("raw", ["1/5/50", "1/5/1950"])
    def test_two_digit_legacy_year_is_1900s(self, raw):
        assert parse_backend_date(raw) == datetime(1950, 1, 5)

    def test_reduced_precision_iso(self):
        assert parse_backend_date("2024") == datetime(2024, 1, 1)
        assert parse_backend_date("2024-03") == datetime(2024, 3, 1)

    @pytest.mark.parametrize("raw", [None, "", "not-a-date", "2/30/2024", "1/2", 20240117])
    def test_unreadable_is_none(self, raw):
        assert parse_backend_date(raw) is None


def test_day_bounds():
    d = datetime(2024, 1, 17, 15, 45)
    assert start_of_day(d) == datetime(2024, 1, 17)
    assert end_of_day(d) == datetime.combine(date(2024, 1, 17), time.max)


def test_coerce_date_rejects_non_dates():
    assert coerce_date("2024-01-17") is None
    assert coerce_date(date(2024, 1, 17)) == datetime(2024, 1, 17)


class TestOccursOnDay:
    def test_single_day_activity(self):
        assert occurs_on_day("1/15/2024", "1/15/2024", datetime(2024, 1, 15))
        assert not occurs_on_day("1/15/2024", "1/15/2024", datetime(2024, 1, 16))
        assert not occurs_on_day("1/15/2024", "1/15/2024", datetime(2024, 1, 14))

    def test_multi_day_interval_touches_every_day(self):
        for day in (15, 16, 17):
            assert occurs_on_day("1/15/2024", "2024-01-17", datetime(2024, 1, day))

    def test_time_of_day_still_touches(self):
        assert occurs_on_day("2024-01-15T23:00:00", "2024-01-15T23:30:00", datetime(2024, 1, 15, 1))

    def test_missing_or_bad_input(self):
        assert not occurs_on_day(None, "1/15/2024", datetime(2024, 1, 15))
        assert not occurs_on_day("1/15/2024", "", datetime(2024, 1, 15))
        assert not occurs_on_day("nope", "1/15/2024", datetime(2024, 1, 15))
        assert not occurs_on_day("1/15/2024", "1/15/2024", "2024-01-15")


class TestFormatting:
    def test_short(self, wednesday):
        assert format_short(wednesday) == "T4 17/01"
        assert format_short(wednesday, EN) == "Wed 17/01"

    def test_long(self, wednesday):
        assert format_long(wednesday) == "thứ tư, 17/01/2024"

    def test_invalid_falls_back_to_now(self):
        assert format_short(None)
        assert format_long("garbage")

    def test_date_range(self):
        assert format_date_range("1/15/2024", "2024-01-17") == "15/01 → 17/01"
        assert format_date_range("1/15/2024", None) == ""

    def test_display_date(self):
        assert format_display_date("1/5/2024") == "05/01/2024"
        assert format_display_date(None) == "-"
        assert format_display_date("not-a-date") == "-"


def test_iso_day_pads_early_years():
    assert format_iso_day(datetime(50, 1, 5, 12)) == "0050-01-05"
    assert format_iso_day(date(999, 3, 3)) == "0999-03-03"
    assert format_iso_day(datetime(2024, 1, 17)) == "2024-01-17"
