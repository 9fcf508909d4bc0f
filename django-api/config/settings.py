"""Django settings for the ticket purchase service.

Environment is read with django-environ from the process environment or an
optional ``.env`` file next to ``django-api/``.
"""

from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve().parent.parent

env = environ.Env(
    DEBUG=(bool, False),
    SECRET_KEY=(str, ""),
    LOG_LEVEL=(str, "INFO"),
)

env_file = BASE_DIR.parent / ".env"
if env_file.exists():
    env.read_env(str(env_file))

SECRET_KEY = env("SECRET_KEY") or "dev-insecure-change-me"
DEBUG = env.bool("DEBUG")
ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
    "tickets.apps.TicketsConfig",
]

# No persistence: purchases are validated and handed to the providers.
DATABASES: dict = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

# Prices are whole currency units (GBP).
TICKETS = {
    "PRICES": {
        "ADULT": 25,
        "CHILD": 15,
        "INFANT": 0,
    },
    "MAX_TICKETS_PER_PURCHASE": 25,
}

LOG_LEVEL = env("LOG_LEVEL").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "tickets": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
        },
    },
}
