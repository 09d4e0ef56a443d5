"""
ASGI config for the plgames project.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "plgames.settings")

application = get_asgi_application()
