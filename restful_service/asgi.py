"""ASGI config for the pageable resource service."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "restful_service.settings")

application = get_asgi_application()
