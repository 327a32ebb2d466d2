"""activities/urls.py"""

from django.urls import path, re_path
from . import views

app_name = "activities"

urlpatterns = [
    # Calendar page; view and anchor date come from ?view=&date=
    path("", views.ActivitiesCalendarView.as_view(), name="calendar"),
    re_path(
        r"^day/(?P<day>\d{4}-\d{2}-\d{2})/$",
        views.DayActivitiesView.as_view(),
        name="day",
    ),
    path("<int:pk>/", views.ActivityDetailView.as_view(), name="detail"),
]
