"""
Django settings for the flight search backend.
All configuration comes from environment variables; a local .env is loaded when present.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")


def _env_int(name, default):
    try:
        return int(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default


SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-dev-only-key-change-in-production")

DEBUG = os.environ.get("DJANGO_DEBUG", "False").lower() in ("true", "1", "yes")

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "flights",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "flightsearch.urls"

WSGI_APPLICATION = "flightsearch.wsgi.application"

# Stateless service; the database only exists for the test runner.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

APPEND_SLASH = False

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
}

# Flights

AVIATIONSTACK_API_KEY = os.environ.get("AVIATIONSTACK_API_KEY", "").strip("\"'") or None
AVIATIONSTACK_BASE_URL = os.environ.get("AVIATIONSTACK_BASE_URL", "http://api.aviationstack.com/v1")

# Optional override: "aviationstack" or "fixture". Unset means live when a key is present.
FLIGHTS_PROVIDER = os.environ.get("FLIGHTS_PROVIDER") or None
FLIGHTS_REFERENCE_HUB = os.environ.get("FLIGHTS_REFERENCE_HUB", "SYD")
FLIGHTS_DEFAULT_PAGE_SIZE = _env_int("FLIGHTS_DEFAULT_PAGE_SIZE", 10)
FLIGHTS_MAX_PAGE_SIZE = _env_int("FLIGHTS_MAX_PAGE_SIZE", 100)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "flights": {
            "handlers": ["console"],
            "level": os.environ.get("FLIGHTS_LOG_LEVEL", "INFO").upper(),
            "propagate": False,
        },
    },
}
