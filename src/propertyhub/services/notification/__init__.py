# propertyhub/services/notification/__init__.py
"""
Notification services package.

Provides the email providers (SendGrid, Django mail) and the
NotificationService orchestrator.
"""

from .notification_service import NotificationService, notify_best_effort
from .providers import (
    DjangoEmailProvider,
    NotificationProvider,
    NotificationProviderFactory,
    SendGridProvider,
)

__all__ = [
    "DjangoEmailProvider",
    "NotificationProvider",
    "NotificationProviderFactory",
    "NotificationService",
    "SendGridProvider",
    "notify_best_effort",
]
