# propertyhub/services/notification/notification_service.py
"""
Notification service.

Creates in-app Notification records and, when NOTIFICATION_EMAIL_ENABLED is
set, queues email delivery through the send_notification_task Celery task
once the surrounding transaction commits.
"""

import logging
from collections.abc import Iterable
from typing import Any

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from propertyhub.exceptions import NotFoundError
from propertyhub.models import Notification, NotificationType, User

from .providers import NotificationProviderFactory

logger = logging.getLogger(__name__)


class NotificationService:
    """
    Service to create in-app notifications and deliver them by email.
    """

    def __init__(self, email_enabled: bool | None = None):
        if email_enabled is None:
            email_enabled = getattr(settings, "NOTIFICATION_EMAIL_ENABLED", False)
        self.email_enabled = email_enabled
        self.config = {
            "SENDGRID_API_KEY": getattr(settings, "SENDGRID_API_KEY", ""),
            "DEFAULT_FROM_EMAIL": getattr(settings, "DEFAULT_FROM_EMAIL", ""),
        }

    def create_notification(
        self,
        user: User,
        title: str,
        message: str,
        notification_type: str = NotificationType.INFO.value,
        related_type: str | None = None,
        related_id: int | None = None,
        created_by: int | None = None,
    ) -> Notification:
        """Create one in-app notification for ``user``."""
        notification = Notification(
            user=user,
            title=title,
            message=message,
            type=notification_type,
            related_type=related_type,
            related_id=related_id,
            created_by=created_by,
        )
        notification.full_clean(exclude=["user"])
        notification.save()

        self._queue_email([user.user_id], title, message)
        return notification

    def notify_admins(
        self,
        title: str,
        message: str,
        notification_type: str = NotificationType.INFO.value,
        related_type: str | None = None,
        related_id: int | None = None,
        created_by: int | None = None,
    ) -> list[Notification]:
        """Create the same notification for every active admin."""
        admins = list(User.objects.active_admins())
        if not admins:
            logger.info("No active admins to notify about '%s'", title)
            return []

        notifications = Notification.objects.bulk_create(
            [
                Notification(
                    user=admin,
                    title=title,
                    message=message,
                    type=notification_type,
                    related_type=related_type,
                    related_id=related_id,
                    created_by=created_by,
                )
                for admin in admins
            ]
        )

        self._queue_email([admin.user_id for admin in admins], title, message)
        return notifications

    # -------------------------------------------------------------------------
    # Inbox
    # -------------------------------------------------------------------------

    @staticmethod
    def list_notifications(user_id: int, unread_only: bool = False):
        notifications = Notification.objects.filter(
            user_id=user_id, is_active=1, is_deleted=0
        )
        if unread_only:
            notifications = notifications.filter(is_read=0)
        return notifications.order_by("-created_at", "-notification_id")

    @staticmethod
    def mark_as_read(notification_id: int, user_id: int) -> Notification:
        notification = Notification.objects.filter(
            notification_id=notification_id,
            user_id=user_id,
            is_active=1,
            is_deleted=0,
        ).first()
        if not notification:
            raise NotFoundError("Notification not found.")

        notification.mark_as_read(user_id=user_id)
        return notification

    @staticmethod
    def mark_all_as_read(user_id: int) -> int:
        """Mark every unread notification of the user as read; return the count."""
        return Notification.objects.filter(
            user_id=user_id, is_active=1, is_deleted=0, is_read=0
        ).update(is_read=1, updated_by=user_id, updated_at=timezone.now())

    # -------------------------------------------------------------------------
    # External delivery
    # -------------------------------------------------------------------------

    def send_notification(
        self,
        user: User,
        title: str,
        message: str,
        channels: list[str] | None = None,
    ) -> dict[str, Any]:
        """
        Deliver a notification to ``user`` over external channels.

        Returns:
            Dict mapping channel names to success booleans
        """
        channels = channels or ["email"]
        results: dict[str, Any] = {}

        for channel in channels:
            provider = NotificationProviderFactory.get_provider(channel, self.config)
            recipient = user.email if channel == "email" else None

            if not recipient:
                logger.warning(
                    "No recipient info for user %s on channel %s", user.pk, channel
                )
                results[channel] = False
                continue

            results[channel] = provider.send(recipient, message, subject=title)

        return results

    def _queue_email(self, user_ids: Iterable[int], title: str, message: str):
        if not self.email_enabled:
            return

        from propertyhub.tasks.tasks import send_notification_task

        for user_id in user_ids:
            transaction.on_commit(
                lambda uid=user_id: send_notification_task.delay(
                    uid, title, message, ["email"]
                )
            )


def notify_best_effort(send, *args, **kwargs) -> bool:
    """
    Call a NotificationService method without letting it fail the caller.

    The call runs in its own savepoint, so a database error while writing
    notifications rolls back only the notifications. Failures are logged.
    """
    try:
        with transaction.atomic():
            send(*args, **kwargs)
    except Exception as e:
        logger.warning(
            "Notification '%s' could not be delivered: %s", kwargs.get("title"), e
        )
        return False
    return True
