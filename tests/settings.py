from core.settings import *  # noqa: F401,F403

INSTALLED_APPS = INSTALLED_APPS + ["tests.testapp"]  # noqa: F405

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

MONEY = {
    "DEFAULT_CURRENCY": "EUR",
    "ZERO": None,
    "SYMBOLS": {},
    "BANK": {"NAME": "no_exchange"},
}

CURRENCY_BEACON_API_KEY = "test-key"
CURRENCY_BEACON_URL = "https://api.currencybeacon.test/v1"
EXCHANGERATE_API_KEY = "test-key"
EXCHANGERATE_URL = "https://v6.exchangerate-api.test/v6"
