"""farmcal/urls.py"""

from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="activities:calendar", permanent=False)),
    path("activities/", include("activities.urls")),
]
