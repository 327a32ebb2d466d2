"""activities/services.py

Where activities come from: the farm backend's REST API, or a local JSON
fixture when no backend URL is configured.
"""

import json
import logging
from pathlib import Path

import requests
from django.conf import settings

from .models import Activity

logger = logging.getLogger(__name__)

ACTIVITIES_PATH = "/v1/farm-activity/get-all"


class ActivityServiceError(Exception):
    """Activities could not be loaded from their source."""


def parse_activities(payload):
    """Accept a bare list or the backend's `{status, message, data}` envelope."""
    if isinstance(payload, dict):
        payload = payload.get("data")
    if not isinstance(payload, list):
        raise ActivityServiceError("Activity payload is not a list")

    activities = []
    for item in payload:
        if not isinstance(item, dict):
            logger.warning("Ignoring non-object activity record: %r", item)
            continue
        activities.append(Activity.from_api(item))
    return activities


class FarmActivityClient:
    def __init__(self, base_url, token="", timeout=10, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {"Accept": "application/json"}
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

    def get_all(self):
        url = f"{self.base_url}{ACTIVITIES_PATH}"
        logger.info("Fetching farm activities from %s", url)

        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Network error fetching activities: %s", e)
            raise ActivityServiceError(f"Network error: {e}") from e

        if response.status_code != 200:
            logger.error("Activity API error %s: %s", response.status_code, response.text[:200])
            raise ActivityServiceError(f"Activity API request failed: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise ActivityServiceError("Activity API returned invalid JSON") from e

        activities = parse_activities(payload)
        logger.info("Loaded %d activities", len(activities))
        return activities


def load_fixture_activities(path):
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.error("Cannot read activity fixture %s: %s", path, e)
        raise ActivityServiceError(f"Cannot read activity fixture {path}") from e
    return parse_activities(payload)


def fetch_activities():
    """All activities from the configured source."""
    if settings.FARM_API_BASE_URL:
        client = FarmActivityClient(
            settings.FARM_API_BASE_URL,
            token=settings.FARM_API_TOKEN,
            timeout=settings.FARM_API_TIMEOUT,
        )
        return client.get_all()
    return load_fixture_activities(settings.FARM_ACTIVITIES_FIXTURE)


def get_activity(activity_id):
    for activity in fetch_activities():
        if activity.id == activity_id:
            return activity
    return None


def filter_activities(activities, status=None, activity_type=None):
    """Page filters; empty or "all" means no filtering on that field."""
    if status and status.lower() != "all":
        activities = [a for a in activities if a.normalized_status == status.upper()]
    if activity_type and activity_type.lower() != "all":
        activities = [a for a in activities if a.activity_type == activity_type]
    return list(activities)
