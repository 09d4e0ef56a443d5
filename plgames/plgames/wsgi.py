"""
WSGI config for the plgames project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "plgames.settings")

application = get_wsgi_application()
