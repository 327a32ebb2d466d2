from datetime import date, datetime, timedelta

import pytest

from activities import ranges
from activities.locales import EN


def test_week_is_monday_first(wednesday):
    days = ranges.range_week(wednesday)
    assert days == [datetime(2024, 1, d) for d in range(15, 22)]


def test_week_of_sunday_belongs_to_previous_monday():
    days = ranges.range_week(datetime(2024, 1, 21, 18, 0))
    assert days[0] == datetime(2024, 1, 15)
    assert days[-1] == datetime(2024, 1, 21)


def test_week_accepts_plain_date():
    assert ranges.range_week(date(2024, 1, 17))[0] == datetime(2024, 1, 15)


def test_week_of_invalid_date_is_current_week():
    days = ranges.range_week(None)
    assert len(days) == 7
    assert days[0].weekday() == 0


def test_day_is_local_midnight():
    assert ranges.range_day(datetime(2024, 1, 17, 13, 5)) == [datetime(2024, 1, 17)]


def test_month_covers_whole_weeks():
    days = ranges.range_month(datetime(2024, 1, 17))
    assert len(days) == 35
    assert days[0] == datetime(2024, 1, 1)
    assert days[-1] == datetime(2024, 2, 4)


def test_month_padding_from_neighbouring_months():
    weeks = ranges.month_weeks(datetime(2024, 2, 10))
    assert weeks[0][0] == datetime(2024, 1, 29)
    assert all(len(week) == 7 for week in weeks)
    assert weeks[-1][-1] == datetime(2024, 3, 3)


def test_agenda_window(wednesday):
    days = ranges.range_agenda(wednesday, 30)
    assert len(days) == 30
    assert days[0] == wednesday
    assert days[-1] == wednesday + timedelta(days=29)


class TestNavigate:
    @pytest.mark.parametrize(
        "granularity, action, expected",
        [
            (ranges.WEEK, ranges.PREV, datetime(2024, 1, 10)),
            (ranges.WEEK, ranges.NEXT, datetime(2024, 1, 24)),
            (ranges.DAY, ranges.PREV, datetime(2024, 1, 16)),
            (ranges.DAY, ranges.NEXT, datetime(2024, 1, 18)),
            (ranges.MONTH, ranges.PREV, datetime(2023, 12, 17)),
            (ranges.MONTH, ranges.NEXT, datetime(2024, 2, 17)),
            (ranges.AGENDA, ranges.NEXT, datetime(2024, 2, 16)),
        ],
    )
    def test_prev_next(self, wednesday, granularity, action, expected):
        assert ranges.navigate(wednesday, action, granularity) == expected

    def test_month_step_clamps_day(self):
        assert ranges.navigate(datetime(2024, 1, 31), ranges.NEXT, ranges.MONTH) == datetime(2024, 2, 29)
        assert ranges.navigate(datetime(2024, 3, 31), ranges.PREV, ranges.MONTH) == datetime(2024, 2, 29)

    def test_today_ignores_anchor(self, wednesday):
        before = datetime.now()
        result = ranges.navigate(wednesday, ranges.TODAY, ranges.WEEK)
        assert before <= result <= datetime.now()

    def test_date_action_keeps_anchor(self, wednesday):
        assert ranges.navigate(wednesday, ranges.DATE, ranges.WEEK) == wednesday

    def test_invalid_date_never_raises(self):
        result = ranges.navigate("not-a-date", ranges.NEXT, ranges.WEEK)
        assert isinstance(result, datetime)

    def test_overflow_falls_back_to_now(self):
        result = ranges.navigate(datetime.max, ranges.NEXT, ranges.WEEK)
        assert isinstance(result, datetime)
        assert result.year == datetime.now().year

    def test_unknown_granularity_keeps_date(self, wednesday):
        assert ranges.navigate(wednesday, ranges.NEXT, "year") == wednesday


class TestTitle:
    def test_week(self, wednesday):
        assert ranges.title(wednesday, ranges.WEEK) == "15/01 - 21/01/2024"

    def test_month(self, wednesday):
        assert ranges.title(wednesday, ranges.MONTH) == "tháng 1 2024"
        assert ranges.title(wednesday, ranges.MONTH, EN) == "January 2024"

    def test_day(self, wednesday):
        assert ranges.title(wednesday, ranges.DAY) == "thứ tư, 17/01"

    def test_agenda(self, wednesday):
        assert ranges.title(wednesday, ranges.AGENDA) == "17/01/2024 - 15/02/2024"

    def test_invalid_date_still_titled(self):
        assert ranges.title(None, ranges.WEEK)
