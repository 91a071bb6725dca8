"""Minimal Django settings for the test suite. No database is used."""

SECRET_KEY = "gatherings-tests"

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "gatherings",
]

DATABASES = {}

USE_TZ = True
TIME_ZONE = "UTC"

GATHERINGS = {
    "DEFAULT_ORGANIZER": "You",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "gatherings": {"handlers": ["console"], "level": "DEBUG"},
    },
}
