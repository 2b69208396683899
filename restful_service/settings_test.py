"""Test-specific Django settings."""

from .settings import *

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost"]

JWT_AUTH_ENABLED = True
JWT_SECRET = "test-secret-key-with-at-least-32-bytes"

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

# Suppress logs during tests (only show CRITICAL errors)
LOGGING_CONFIG = "logging.config.dictConfig"
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "null": {
            "class": "logging.NullHandler",
        },
    },
    "root": {
        "handlers": ["null"],
        "level": "CRITICAL",
    },
    "loggers": {
        "django": {
            "handlers": ["null"],
            "level": "CRITICAL",
            "propagate": False,
        },
        "restful": {
            "handlers": ["null"],
            "level": "CRITICAL",
            "propagate": False,
        },
    },
}

TEST_MODE = True
