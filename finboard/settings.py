import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-finboard-dev-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() in ("true", "1", "yes")

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "conversion",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "finboard.urls"

WSGI_APPLICATION = "finboard.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

TIME_ZONE = "UTC"
USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
}

_conversion_timeout = os.environ.get("CURRENCY_CONVERSION_TIMEOUT", "")

CURRENCY_CONVERSION = {
    "primary_endpoint": os.environ.get(
        "EXCHANGERATE_HOST_API_URL", "https://api.exchangerate.host"
    ),
    "primary_api_key": os.environ.get("EXCHANGERATE_API_KEY", ""),
    "fallback_endpoint": os.environ.get(
        "ALPHA_VANTAGE_API_URL", "https://www.alphavantage.co"
    ),
    "fallback_api_key": os.environ.get("ALPHA_VANTAGE_API_KEY", ""),
    "timeout": float(_conversion_timeout) if _conversion_timeout else None,
}

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

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
        "conversion": {"handlers": ["console"], "level": LOG_LEVEL},
        "external": {"handlers": ["console"], "level": LOG_LEVEL},
    },
}
