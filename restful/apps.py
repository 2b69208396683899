"""Django application configuration for restful."""

from django.apps import AppConfig
from django.conf import settings

from restful.logging import setup_logging


class RestfulConfig(AppConfig):
    """Configuration class for the restful application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "restful"

    def ready(self) -> None:
        """Configure structured logging once Django is ready."""
        if not getattr(settings, "TEST_MODE", False):
            setup_logging()
