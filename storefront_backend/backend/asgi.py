# backend/asgi.py
"""
PATH: backend/asgi.py

ASGI config for the storefront backend.
Request handling stays synchronous; this only exposes the same app to ASGI servers.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.settings.dev")

application = get_asgi_application()
