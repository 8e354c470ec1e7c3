# settings/production.py
"""
Production: PostgreSQL, Redis cache and Celery broker, SMTP or SendGrid email,
HTTPS-only cookies and JSON logs.

Required environment variables: SECRET_KEY, DB_NAME, DB_USER, DB_PASSWORD,
DB_HOST. ALLOWED_HOSTS and CORS_ALLOWED_ORIGINS should name the public
domains.
"""

from .base import *  # noqa: F403
from .base import REST_FRAMEWORK, _validate_required_settings
from .components import (
    env_bool,
    get_allowed_hosts,
    get_cache_settings,
    get_celery_settings,
    get_cors_settings,
    get_database_settings,
    get_email_settings,
    get_redis_url,
    get_security_settings,
)

ENVIRONMENT = "production"
DEBUG = False

_validate_required_settings()

REDIS_URL = get_redis_url()

globals().update(get_database_settings())
globals().update(get_cache_settings(REDIS_URL))
globals().update(get_celery_settings(REDIS_URL))
globals().update(get_cors_settings(debug=False))
globals().update(get_security_settings(debug=False))
globals().update(get_email_settings())
ALLOWED_HOSTS = get_allowed_hosts(debug=False)

EMAIL_BACKEND = "django.core.mail.backends.smtp.EmailBackend"

LOG_TO_FILE = env_bool("LOG_TO_FILE", True)

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
}
