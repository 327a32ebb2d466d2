"""activities/locales.py

Calendar locales are passed explicitly to the range/title helpers and the
view strategies; nothing here is installed globally.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CalendarLocale:
    code: str
    months: tuple
    weekdays: tuple  # Monday first, matches date.weekday()
    weekdays_short: tuple
    messages: dict = field(default_factory=dict)

    def month_name(self, d):
        return self.months[d.month - 1]

    def weekday_name(self, d):
        return self.weekdays[d.weekday()]

    def weekday_short(self, d):
        return self.weekdays_short[d.weekday()]

    def message(self, key, **kwargs):
        text = self.messages.get(key, key)
        return text.format(**kwargs) if kwargs else text


VI = CalendarLocale(
    code="vi",
    months=tuple(f"tháng {m}" for m in range(1, 13)),
    weekdays=("thứ hai", "thứ ba", "thứ tư", "thứ năm", "thứ sáu", "thứ bảy", "chủ nhật"),
    weekdays_short=("T2", "T3", "T4", "T5", "T6", "T7", "CN"),
    messages={
        "next": "Tiếp",
        "previous": "Trước",
        "today": "Hôm nay",
        "all": "Tất cả",
        "month": "Tháng",
        "week": "Tuần",
        "day": "Ngày",
        "agenda": "Danh sách",
        "date": "Ngày",
        "event": "Sự kiện",
        "no_events_in_range": "Không có hoạt động trong khoảng thời gian này.",
        "no_activities": "Không có hoạt động",
        "no_activities_day": "Không có hoạt động trong ngày này",
        "activities_in_day": "{count} hoạt động trong ngày",
        "create_activity": "Tạo hoạt động mới",
        "show_more": "+{count} thêm",
        "overdue": "Quá hạn",
        "load_error": "Không thể tải danh sách hoạt động.",
    },
)

EN = CalendarLocale(
    code="en",
    months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    weekdays=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    weekdays_short=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    messages={
        "next": "Next",
        "previous": "Back",
        "today": "Today",
        "all": "All",
        "month": "Month",
        "week": "Week",
        "day": "Day",
        "agenda": "Agenda",
        "date": "Date",
        "event": "Event",
        "no_events_in_range": "There are no activities in this range.",
        "no_activities": "No activities",
        "no_activities_day": "No activities on this day",
        "activities_in_day": "{count} activities on this day",
        "create_activity": "Create activity",
        "show_more": "+{count} more",
        "overdue": "Overdue",
        "load_error": "Could not load activities.",
    },
)

LOCALES = {VI.code: VI, EN.code: EN}


def get_locale(code):
    """Look up a locale by code; unknown codes fall back to Vietnamese."""
    return LOCALES.get((code or "").lower(), VI)
