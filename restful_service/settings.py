"""Django settings for the pageable resource service.

All deployment-specific values are read from environment variables.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


# Security
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-insecure-key-change-me")
DEBUG = _env_bool("DEBUG")
ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

# Applications
INSTALLED_APPS = [
    "rest_framework",
    "restful.apps.RestfulConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "restful.middleware.RequestIDMiddleware",
    "restful.middleware.ProcessTimeMiddleware",
    "restful.middleware.SecurityHeadersMiddleware",
]

ROOT_URLCONF = "restful_service.urls"

WSGI_APPLICATION = "restful_service.wsgi.application"
ASGI_APPLICATION = "restful_service.asgi.application"

# The service keeps no state of its own
DATABASES: dict = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Django REST Framework
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "restful.auth.jwt.JWTAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "EXCEPTION_HANDLER": "restful.exceptions.handlers.custom_exception_handler",
    # django.contrib.auth is not installed, so there is no AnonymousUser
    "UNAUTHENTICATED_USER": None,
}

# JWT authentication
JWT_AUTH_ENABLED = _env_bool("JWT_AUTH_ENABLED", "true")
JWT_SECRET = os.getenv("JWT_SECRET", "")
JWT_REALM = os.getenv("JWT_REALM", "ujar")

# Logging is configured by restful.logging.setup_logging() at app startup
LOGGING_CONFIG = None

TEST_MODE = False
