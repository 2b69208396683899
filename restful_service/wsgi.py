"""WSGI config for the pageable resource service."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "restful_service.settings")

application = get_wsgi_application()
