# settings/base.py
"""
Settings shared by every environment of the PropertyHub backend.

development.py, production.py and test.py star-import this module and then
override the database, cache, Celery, email and HTTP security groups using
the factories in components.py.
"""

import os
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

from .components import env_bool, env_list, get_moderation_settings

# .env must be loaded before anything below reads os.environ
load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent.parent

DJANGO_ENV = os.environ.get("DJANGO_ENV", "development").lower()
IS_PRODUCTION = DJANGO_ENV in ("production", "prod")
IS_TEST = DJANGO_ENV in ("test", "testing")
IS_DEVELOPMENT = not (IS_PRODUCTION or IS_TEST)

INSECURE_SECRET_KEY = "django-insecure-propertyhub-dev-key"  # noqa: S105

SECRET_KEY = os.environ.get("SECRET_KEY", INSECURE_SECRET_KEY)
DEBUG = False
ALLOWED_HOSTS = ["localhost", "127.0.0.1"]


def _validate_required_settings():
    """
    Fail fast when production is started without its secrets.

    Raises:
        ImproperlyConfigured: listing the missing environment variables
    """
    from django.core.exceptions import ImproperlyConfigured

    missing = [
        var
        for var in ("SECRET_KEY", "DB_NAME", "DB_USER", "DB_PASSWORD", "DB_HOST")
        if not os.environ.get(var)
    ]
    if missing:
        raise ImproperlyConfigured(
            "Missing required environment variables: " + ", ".join(missing)
        )


# =============================================================================
# APPLICATIONS
# =============================================================================

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # Third party
    "rest_framework",
    "corsheaders",
    "drf_yasg",
    # Local
    "propertyhub",
]

AUTH_USER_MODEL = "propertyhub.User"
DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "propertyhub.middleware.RequestLoggingMiddleware",
]

# Binds request_id and the authenticated user to every log line of a request
USE_STRUCTLOG_MIDDLEWARE = env_bool("USE_STRUCTLOG_MIDDLEWARE", True)
if USE_STRUCTLOG_MIDDLEWARE:
    MIDDLEWARE.insert(0, "propertyhubutils.logging.StructlogMiddleware")

ROOT_URLCONF = "configuration.urls"
WSGI_APPLICATION = "configuration.wsgi.application"

# Templates are only rendered by the Django admin and the Swagger UI
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
]

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"


# =============================================================================
# LOGGING
# =============================================================================

# Applied by propertyhubutils.logging.configure_logging() from
# PropertyHubConfig.ready()
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
USE_STRUCTURED_LOGGING = env_bool("USE_STRUCTURED_LOGGING", True)
LOG_TO_FILE = env_bool("LOG_TO_FILE", False)
LOGS_DIR = BASE_DIR / "logs"


# =============================================================================
# REST API
# =============================================================================

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "propertyhub.authentication.CustomJWTAuthentication",
    ],
    # Each view declares its own permission classes
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
        "rest_framework.renderers.BrowsableAPIRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
    ],
    "EXCEPTION_HANDLER": "propertyhub.exceptions.custom_exception_handler",
    "DEFAULT_PAGINATION_CLASS": "rest_framework.pagination.PageNumberPagination",
    "PAGE_SIZE": 20,
}

# Tokens are issued by the account service; this backend only validates them.
SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(hours=2),
    "REFRESH_TOKEN_LIFETIME": timedelta(days=7),
    "AUTH_HEADER_TYPES": ("Bearer",),
    "USER_ID_FIELD": "user_id",
    "USER_ID_CLAIM": "user_id",
    "SIGNING_KEY": os.environ.get("JWT_SIGNING_KEY", SECRET_KEY),
}

SWAGGER_SETTINGS = {
    "SECURITY_DEFINITIONS": {
        "Bearer": {
            "type": "apiKey",
            "name": "Authorization",
            "in": "header",
            "description": 'JWT bearer token, e.g. "Authorization: Bearer <token>"',
        }
    },
    "USE_SESSION_AUTH": False,
    "SUPPORTED_SUBMIT_METHODS": ["get", "post", "put"],
    "OPERATIONS_SORTER": "alpha",
    "TAGS_SORTER": "alpha",
}

CORS_ALLOWED_ORIGINS = env_list("CORS_ALLOWED_ORIGINS")


# =============================================================================
# CACHE AND EMAIL DEFAULTS
# =============================================================================

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "propertyhub",
    }
}

EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"
DEFAULT_FROM_EMAIL = os.environ.get("DEFAULT_FROM_EMAIL", "noreply@propertyhub.local")
SENDGRID_API_KEY = os.environ.get("SENDGRID_API_KEY", "")


# =============================================================================
# LISTING MODERATION
# =============================================================================

# LISTING_REPORT_FLAG_THRESHOLD, LISTING_EXTRA_PROHIBITED_TERMS,
# NOTIFICATION_EMAIL_ENABLED, MODERATION_QUEUE_LIMIT
globals().update(get_moderation_settings())


# =============================================================================
# SYSTEM CHECKS
# =============================================================================


def check_settings(app_configs=None, **kwargs):
    """
    System check run by ``manage.py check`` and at server start.

    Registered from PropertyHubConfig.ready().
    """
    from django.conf import settings
    from django.core.checks import Warning

    warnings = []

    if settings.IS_PRODUCTION and settings.DEBUG:
        warnings.append(
            Warning(
                "DEBUG is enabled in production.",
                hint="Set DEBUG=False in production.",
                obj="settings",
                id="settings.W001",
            )
        )

    if settings.IS_PRODUCTION and settings.SECRET_KEY in ("", INSECURE_SECRET_KEY):
        warnings.append(
            Warning(
                "SECRET_KEY is not set for production.",
                hint="Set a random SECRET_KEY environment variable.",
                obj="settings",
                id="settings.W002",
            )
        )

    if settings.LISTING_REPORT_FLAG_THRESHOLD < 1:
        warnings.append(
            Warning(
                "LISTING_REPORT_FLAG_THRESHOLD must be at least 1.",
                hint="Set LISTING_REPORT_FLAG_THRESHOLD to a positive integer.",
                obj="settings",
                id="settings.W003",
            )
        )

    if settings.MODERATION_QUEUE_LIMIT < 1:
        warnings.append(
            Warning(
                "MODERATION_QUEUE_LIMIT must be at least 1.",
                hint="Set MODERATION_QUEUE_LIMIT to a positive integer.",
                obj="settings",
                id="settings.W004",
            )
        )

    return warnings
