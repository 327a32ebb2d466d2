"""
Pytest configuration and shared fixtures.
"""

import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent

# Project package and the apps/ packages
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "apps"))

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "farmcal.settings")
os.environ["FARM_API_BASE_URL"] = ""
os.environ["CALENDAR_LOCALE"] = "vi"

import django  # noqa: E402

django.setup()

from django.test.utils import setup_test_environment  # noqa: E402

setup_test_environment()

from activities.models import Activity  # noqa: E402


def make_activity(id=1, activity_type="Sowing", start="1/17/2024", end="1/17/2024", status="ACTIVE"):
    return Activity(id=id, activity_type=activity_type, start_date=start, end_date=end, status=status)


@pytest.fixture
def activity_factory():
    return make_activity


@pytest.fixture
def wednesday():
    """Wednesday 17 January 2024, local midnight."""
    return datetime(2024, 1, 17)


@pytest.fixture
def sample_payload():
    """Backend envelope as returned by /v1/farm-activity/get-all."""
    return {
        "status": 200,
        "message": "OK",
        "data": [
            {
                "farmActivitiesId": 1,
                "activityType": "Sowing",
                "startDate": "1/15/2024",
                "endDate": "1/17/2024",
                "status": "ACTIVE",
            },
            {
                "farmActivitiesId": 2,
                "activityType": "Harvesting",
                "startDate": "2024-01-17",
                "endDate": "2024-01-18",
                "status": "IN_PROGRESS",
            },
            {
                "farmActivitiesId": 3,
                "activityType": "Weeding",
                "startDate": None,
                "endDate": "1/17/2024",
                "status": "ACTIVE",
            },
        ],
    }


@pytest.fixture
def sample_activities(sample_payload):
    return [Activity.from_api(item) for item in sample_payload["data"]]
