"""WSGI entry point for the meet & greet booking API."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "meetgreet.settings")

application = get_wsgi_application()
