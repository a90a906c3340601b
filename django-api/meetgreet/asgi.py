"""ASGI entry point for the meet & greet booking API."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "meetgreet.settings")

application = get_asgi_application()
