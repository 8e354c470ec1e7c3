# settings/test.py
"""
Test settings: in-memory SQLite, local-memory cache and email, eager Celery.

Selected by DJANGO_ENV=test and referenced directly by pytest
(DJANGO_SETTINGS_MODULE in pyproject.toml). Moderation settings are pinned so
tests do not depend on the developer's .env.
"""

from .base import *  # noqa: F403
from .base import MIDDLEWARE
from .components import get_cors_settings, get_security_settings

ENVIRONMENT = "test"
DJANGO_ENV = "test"
IS_TEST = True
IS_DEVELOPMENT = False
IS_PRODUCTION = False
DEBUG = False

SECRET_KEY = "propertyhub-test-secret-key"  # noqa: S105
SIMPLE_JWT = {**SIMPLE_JWT, "SIGNING_KEY": SECRET_KEY}  # noqa: F405

USE_STRUCTURED_LOGGING = False
USE_STRUCTLOG_MIDDLEWARE = False
LOG_TO_FILE = False
MIDDLEWARE = [
    item for item in MIDDLEWARE if item != "propertyhubutils.logging.StructlogMiddleware"
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
        "ATOMIC_REQUESTS": True,
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "propertyhub-tests",
    }
}

# send_notification_task runs inline and re-raises
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = "memory://"

EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
SENDGRID_API_KEY = ""

globals().update(get_cors_settings(debug=True))
globals().update(get_security_settings(debug=True))
ALLOWED_HOSTS = ["*"]

AUTH_PASSWORD_VALIDATORS = []
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

LISTING_REPORT_FLAG_THRESHOLD = 3
LISTING_EXTRA_PROHIBITED_TERMS = []
NOTIFICATION_EMAIL_ENABLED = False
MODERATION_QUEUE_LIMIT = 50
