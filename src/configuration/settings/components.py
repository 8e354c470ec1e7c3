# settings/components.py
"""
Settings factories shared by the environment modules.

Each ``get_*`` function reads its environment variables and returns a dict of
Django setting names to values, applied with ``globals().update(...)``:

    from .components import get_moderation_settings
    globals().update(get_moderation_settings())
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

_TRUE_VALUES = ("true", "1", "yes", "on")


def env_bool(key: str, default: bool = False) -> bool:
    value = os.environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def env_int(key: str, default: int) -> int:
    try:
        return int(os.environ.get(key, default))
    except (TypeError, ValueError):
        return default


def env_list(key: str, default: list | None = None) -> list:
    """Comma-separated environment variable as a list of stripped items."""
    items = [item.strip() for item in os.environ.get(key, "").split(",")]
    return [item for item in items if item] or list(default or [])


# =============================================================================
# DATABASE
# =============================================================================


def get_database_settings(sqlite_by_default: bool = False) -> dict:
    """
    Listings, reports and appeals live in PostgreSQL; USE_SQLITE switches to a
    local file database.

    Environment variables:
        USE_SQLITE, DB_NAME, DB_USER, DB_PASSWORD, DB_HOST, DB_PORT_NUMBER,
        DB_SSLMODE, DOCKER_ENV
    """
    if env_bool("USE_SQLITE", sqlite_by_default):
        return {
            "DATABASES": {
                "default": {
                    "ENGINE": "django.db.backends.sqlite3",
                    "NAME": BASE_DIR / "db.sqlite3",
                }
            }
        }

    default_host = "db" if env_bool("DOCKER_ENV") else "localhost"
    return {
        "DATABASES": {
            "default": {
                "ENGINE": "django.db.backends.postgresql",
                "NAME": os.environ.get("DB_NAME", "propertyhub"),
                "USER": os.environ.get("DB_USER", "postgres"),
                "PASSWORD": os.environ.get("DB_PASSWORD", "postgres"),
                "HOST": os.environ.get("DB_HOST", default_host),
                "PORT": env_int("DB_PORT_NUMBER", 5432),
                # One transaction per request
                "ATOMIC_REQUESTS": True,
                "CONN_MAX_AGE": 60,
                "CONN_HEALTH_CHECKS": True,
                "OPTIONS": {
                    "connect_timeout": 10,
                    "sslmode": os.environ.get("DB_SSLMODE", "prefer"),
                },
            }
        }
    }


# =============================================================================
# REDIS: CACHE AND CELERY BROKER
# =============================================================================


def get_redis_url() -> str:
    """
    Environment variables:
        REDIS_URL (wins when set), REDIS_HOST, REDIS_PORT_NUMBER,
        REDIS_PASSWORD, REDIS_DB, DOCKER_ENV
    """
    if os.environ.get("REDIS_URL"):
        return os.environ["REDIS_URL"]

    default_host = "redis" if env_bool("DOCKER_ENV") else "localhost"
    host = os.environ.get("REDIS_HOST", default_host)
    port = env_int("REDIS_PORT_NUMBER", 6379)
    db = env_int("REDIS_DB", 0)
    password = os.environ.get("REDIS_PASSWORD", "")
    auth = f":{password}@" if password else ""
    return f"redis://{auth}{host}:{port}/{db}"


def get_cache_settings(redis_url: str) -> dict:
    """
    Redis cache. Holds the ``blacklist:<jti>`` entries of revoked tokens
    checked by CustomJWTAuthentication.
    """
    return {
        "CACHES": {
            "default": {
                "BACKEND": "django_redis.cache.RedisCache",
                "LOCATION": redis_url,
                "TIMEOUT": env_int("CACHE_DEFAULT_TIMEOUT", 300),
                "KEY_PREFIX": "propertyhub",
                "OPTIONS": {
                    "CLIENT_CLASS": "django_redis.client.DefaultClient",
                    "SOCKET_CONNECT_TIMEOUT": 5,
                    "SOCKET_TIMEOUT": 5,
                    "CONNECTION_POOL_KWARGS": {"max_connections": 50},
                },
            }
        }
    }


def get_celery_settings(redis_url: str) -> dict:
    """
    Celery runs notification email delivery only, on its own queue.

    Environment variables:
        CELERY_BROKER_URL, CELERY_WORKER_CONCURRENCY, CELERY_TASK_TIME_LIMIT
    """
    time_limit = env_int("CELERY_TASK_TIME_LIMIT", 300)
    return {
        "CELERY_BROKER_URL": os.environ.get("CELERY_BROKER_URL", redis_url),
        "CELERY_ACCEPT_CONTENT": ["json"],
        "CELERY_TASK_SERIALIZER": "json",
        "CELERY_TIMEZONE": "UTC",
        "CELERY_TASK_IGNORE_RESULT": True,
        "CELERY_TASK_TIME_LIMIT": time_limit,
        "CELERY_TASK_SOFT_TIME_LIMIT": max(time_limit - 30, 1),
        "CELERY_TASK_ACKS_LATE": True,
        "CELERY_WORKER_CONCURRENCY": env_int("CELERY_WORKER_CONCURRENCY", 2),
        "CELERY_WORKER_PREFETCH_MULTIPLIER": 1,
        "CELERY_TASK_ROUTES": {
            "propertyhub.tasks.tasks.send_notification_task": {
                "queue": "notifications"
            },
        },
    }


# =============================================================================
# HTTP: HOSTS, CORS, SECURITY
# =============================================================================


def get_allowed_hosts(debug: bool = False) -> list:
    return env_list("ALLOWED_HOSTS", ["*"] if debug else ["localhost", "127.0.0.1"])


def get_cors_settings(debug: bool = False) -> dict:
    """
    The listing frontend calls the API cross-origin with a bearer token.

    Environment variables:
        CORS_ALLOWED_ORIGINS, CORS_ALLOW_ALL_ORIGINS
    """
    local_origins = [
        f"http://{host}:{port}"
        for host in ("localhost", "127.0.0.1")
        for port in (3000, 5173, 8000)
    ]
    origins = env_list("CORS_ALLOWED_ORIGINS", local_origins if debug else [])

    return {
        "CORS_ALLOW_ALL_ORIGINS": env_bool("CORS_ALLOW_ALL_ORIGINS", debug),
        "CORS_ALLOWED_ORIGINS": origins,
        "CORS_ALLOW_HEADERS": [
            "accept",
            "authorization",
            "content-type",
            "origin",
            "user-agent",
            "x-requested-with",
        ],
        "CORS_ALLOW_METHODS": ["GET", "OPTIONS", "POST", "PUT"],
        "CORS_ALLOW_CREDENTIALS": True,
        "CSRF_TRUSTED_ORIGINS": origins,
    }


def get_security_settings(debug: bool = False) -> dict:
    if debug:
        return {
            "SECURE_SSL_REDIRECT": False,
            "SESSION_COOKIE_SECURE": False,
            "CSRF_COOKIE_SECURE": False,
            "SECURE_HSTS_SECONDS": 0,
            "X_FRAME_OPTIONS": "SAMEORIGIN",
        }

    return {
        "SECURE_SSL_REDIRECT": env_bool("SECURE_SSL_REDIRECT", True),
        "SECURE_PROXY_SSL_HEADER": ("HTTP_X_FORWARDED_PROTO", "https"),
        "SECURE_HSTS_SECONDS": 31536000,
        "SECURE_HSTS_INCLUDE_SUBDOMAINS": True,
        "SECURE_CONTENT_TYPE_NOSNIFF": True,
        "SECURE_REFERRER_POLICY": "strict-origin-when-cross-origin",
        "SESSION_COOKIE_SECURE": True,
        "CSRF_COOKIE_SECURE": True,
        "X_FRAME_OPTIONS": "DENY",
    }


# =============================================================================
# EMAIL
# =============================================================================


def get_email_settings() -> dict:
    """
    SMTP settings for the Django email backend. Notification email goes
    through SendGrid instead whenever SENDGRID_API_KEY is set.
    """
    return {
        "EMAIL_HOST": os.environ.get("EMAIL_HOST", "localhost"),
        "EMAIL_PORT": env_int("EMAIL_PORT", 587),
        "EMAIL_HOST_USER": os.environ.get("EMAIL_HOST_USER", ""),
        "EMAIL_HOST_PASSWORD": os.environ.get("EMAIL_HOST_PASSWORD", ""),
        "EMAIL_USE_TLS": env_bool("EMAIL_USE_TLS", True),
        "EMAIL_TIMEOUT": env_int("EMAIL_TIMEOUT", 30),
        "DEFAULT_FROM_EMAIL": os.environ.get(
            "DEFAULT_FROM_EMAIL", "noreply@propertyhub.local"
        ),
        "SENDGRID_API_KEY": os.environ.get("SENDGRID_API_KEY", ""),
    }


# =============================================================================
# LISTING MODERATION
# =============================================================================


def get_moderation_settings() -> dict:
    """
    Environment variables:
        LISTING_REPORT_FLAG_THRESHOLD: distinct reports that flag a listing
        LISTING_EXTRA_PROHIBITED_TERMS: comma-separated terms appended to
            the built-in prohibited term table
        NOTIFICATION_EMAIL_ENABLED: also email in-app notifications
        MODERATION_QUEUE_LIMIT: default size of the admin moderation queue
    """
    return {
        "LISTING_REPORT_FLAG_THRESHOLD": env_int("LISTING_REPORT_FLAG_THRESHOLD", 3),
        "LISTING_EXTRA_PROHIBITED_TERMS": env_list("LISTING_EXTRA_PROHIBITED_TERMS"),
        "NOTIFICATION_EMAIL_ENABLED": env_bool("NOTIFICATION_EMAIL_ENABLED"),
        "MODERATION_QUEUE_LIMIT": env_int("MODERATION_QUEUE_LIMIT", 50),
    }
