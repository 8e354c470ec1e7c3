"""
WSGI entry point of the PropertyHub API (``configuration.wsgi:application``).

DJANGO_ENV picks the settings module; deployments set DJANGO_ENV=production.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "configuration.settings")

application = get_wsgi_application()
