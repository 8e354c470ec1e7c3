# settings/development.py
"""
Local development: SQLite, console email, Celery tasks run in-process.

Set USE_SQLITE=false in .env to develop against PostgreSQL and
CELERY_TASK_ALWAYS_EAGER=false to hand notification email to a worker.
"""

from .base import *  # noqa: F403
from .components import (
    env_bool,
    get_allowed_hosts,
    get_celery_settings,
    get_cors_settings,
    get_database_settings,
    get_redis_url,
    get_security_settings,
)

ENVIRONMENT = "development"
DEBUG = True

globals().update(get_database_settings(sqlite_by_default=True))

# The in-memory cache from base.py is enough for a single runserver process
globals().update(get_celery_settings(get_redis_url()))
CELERY_TASK_ALWAYS_EAGER = env_bool("CELERY_TASK_ALWAYS_EAGER", True)

globals().update(get_cors_settings(debug=True))
globals().update(get_security_settings(debug=True))
ALLOWED_HOSTS = get_allowed_hosts(debug=True)

EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"

# Human-readable console logs
USE_STRUCTURED_LOGGING = env_bool("USE_STRUCTURED_LOGGING", False)

INTERNAL_IPS = ["127.0.0.1"]
