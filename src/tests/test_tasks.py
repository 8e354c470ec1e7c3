"""
Unit tests for Celery tasks.
"""

from unittest.mock import MagicMock

import pytest
from django.core import mail


@pytest.mark.unit
class TestSendNotificationTask:
    """Tests for send_notification_task."""

    def test_sends_email(self, test_user):
        from propertyhub.tasks.tasks import send_notification_task

        result = send_notification_task(
            user_id=test_user.user_id,
            title="Property Approved",
            message="Your listing is live",
            channels=["email"],
        )

        assert result == {"email": True}
        assert mail.outbox[0].subject == "Property Approved"

    def test_uses_notification_service(self, test_user, monkeypatch):
        from propertyhub.tasks.tasks import send_notification_task

        mock_service = MagicMock()
        mock_service.send_notification.return_value = {"email": True}
        monkeypatch.setattr(
            "propertyhub.services.notification.NotificationService",
            lambda: mock_service,
        )

        result = send_notification_task(
            user_id=test_user.user_id, title="Test", message="Hello"
        )

        mock_service.send_notification.assert_called_once_with(
            user=test_user, title="Test", message="Hello", channels=None
        )
        assert result == {"email": True}

    def test_missing_user_is_skipped(self):
        from propertyhub.tasks.tasks import send_notification_task

        result = send_notification_task(user_id=999999, title="Test", message="Hello")

        assert result == {"skipped": True, "user_id": 999999}

    def test_failed_delivery_raises(self, test_user, monkeypatch):
        """Called directly, a retry re-raises the delivery error."""
        from propertyhub.tasks.tasks import send_notification_task

        mock_service = MagicMock()
        mock_service.send_notification.return_value = {"email": False}
        monkeypatch.setattr(
            "propertyhub.services.notification.NotificationService",
            lambda: mock_service,
        )

        with pytest.raises(RuntimeError):
            send_notification_task(
                user_id=test_user.user_id, title="Test", message="Hello"
            )

    def test_provider_exception_raises(self, test_user, monkeypatch):
        from propertyhub.tasks.tasks import send_notification_task

        mock_service = MagicMock()
        mock_service.send_notification.side_effect = ValueError("bad channel")
        monkeypatch.setattr(
            "propertyhub.services.notification.NotificationService",
            lambda: mock_service,
        )

        with pytest.raises(ValueError):
            send_notification_task(
                user_id=test_user.user_id, title="Test", message="Hello"
            )
