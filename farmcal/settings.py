"""
Django settings for the farm activity calendar.

Values come from the environment (a local `.env` is loaded first).
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent
APPS_DIR = BASE_DIR / "apps"

# Apps import each other as top-level packages (`from activities.dates import ...`)
if str(APPS_DIR) not in sys.path:
    sys.path.insert(0, str(APPS_DIR))

# =============================================================================
# DJANGO CORE
# =============================================================================

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "farmcal-dev-only-secret-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS = [
    h.strip() for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if h.strip()
]

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "core",
    "activities",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "farmcal.urls"
WSGI_APPLICATION = "farmcal.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "core.context_processors.calendar_context",
            ],
        },
    },
]

# No local persistence: activities are read from the farm backend.
DATABASES = {}

LANGUAGE_CODE = "vi"
TIME_ZONE = os.environ.get("TIME_ZONE", "Asia/Ho_Chi_Minh")
USE_I18N = True
USE_TZ = False

STATIC_URL = "static/"

# =============================================================================
# FARM BACKEND
# =============================================================================

FARM_API_BASE_URL = os.environ.get("FARM_API_BASE_URL", "").rstrip("/")
FARM_API_TOKEN = os.environ.get("FARM_API_TOKEN", "")
FARM_API_TIMEOUT = float(os.environ.get("FARM_API_TIMEOUT", "10"))
FARM_ACTIVITIES_FIXTURE = os.environ.get(
    "FARM_ACTIVITIES_FIXTURE", str(BASE_DIR / "data" / "activities.json")
)

# =============================================================================
# CALENDAR
# =============================================================================

CALENDAR_LOCALE = os.environ.get("CALENDAR_LOCALE", "vi")
CALENDAR_MONTH_MAX_EVENTS = int(os.environ.get("CALENDAR_MONTH_MAX_EVENTS", "3"))
CALENDAR_AGENDA_LENGTH = int(os.environ.get("CALENDAR_AGENDA_LENGTH", "30"))

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "farmcal": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "farmcal",
        },
    },
    "loggers": {
        "activities": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "core": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
}
