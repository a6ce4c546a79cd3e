"""
Django settings for the mymoney project.
Secrets and API keys are read from the environment.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-change-me")
DEBUG = os.environ.get("DJANGO_DEBUG", "true").lower() == "true"
ALLOWED_HOSTS = [h for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "").split(",") if h]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "drf_spectacular",
    "apps.money",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

# Rate sources
CURRENCY_BEACON_API_KEY = os.environ.get("CURRENCY_BEACON_API_KEY", "")
CURRENCY_BEACON_URL = os.environ.get("CURRENCY_BEACON_URL", "https://api.currencybeacon.com/v1")
EXCHANGERATE_API_KEY = os.environ.get("EXCHANGERATE_API_KEY", "")
EXCHANGERATE_URL = os.environ.get("EXCHANGERATE_URL", "https://v6.exchangerate-api.com/v6")

# Money configuration, see apps/money/infrastructure/registry.py
MONEY = {
    "DEFAULT_CURRENCY": os.environ.get("MONEY_DEFAULT_CURRENCY", "EUR"),
    "ZERO": None,
    "SYMBOLS": {},
    "BANK": {"NAME": os.environ.get("MONEY_BANK", "no_exchange")},
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "apps.money": {
            "handlers": ["console"],
            "level": os.environ.get("MONEY_LOG_LEVEL", "INFO"),
        },
    },
}
