# propertyhub/apps.py
"""
Django app configuration for the propertyhub application.

Configures structured logging and registers the settings system checks.
"""

from django.apps import AppConfig
from django.core import checks


class PropertyHubConfig(AppConfig):
    """Configuration for the propertyhub Django application."""

    default_auto_field = "django.db.models.AutoField"
    name = "propertyhub"
    verbose_name = "PropertyHub"

    def ready(self) -> None:
        """
        Initialize application when Django starts.

        Structured logging is configured here so that every entry point
        (runserver, gunicorn, celery worker, management commands) shares it.
        """
        self._configure_structured_logging()
        self._register_checks()

    def _configure_structured_logging(self) -> None:
        """Configure structured logging if enabled."""
        from django.conf import settings

        if getattr(settings, "USE_STRUCTURED_LOGGING", True):
            from propertyhubutils.logging import configure_logging

            configure_logging()

    def _register_checks(self) -> None:
        from configuration.settings.base import check_settings

        checks.register(check_settings, checks.Tags.compatibility)
