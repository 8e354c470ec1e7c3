from celery import shared_task

from propertyhubutils.logging import CeleryLogger


@shared_task(bind=True, max_retries=3, default_retry_delay=60)
def send_notification_task(
    self, user_id: int, title: str, message: str, channels: list | None = None
):
    """
    Async task to deliver a notification over external channels.

    Args:
        user_id: Target user ID
        title: Notification title (email subject)
        message: Notification body
        channels: List of channels. Defaults to email.

    Delivery failures are retried up to max_retries; a recipient that no
    longer exists is logged and skipped.
    """
    from propertyhub.models import User
    from propertyhub.services.notification import NotificationService

    logger = CeleryLogger.get_logger(__name__)

    try:
        user = User.objects.active().get(user_id=user_id)
    except User.DoesNotExist:
        logger.warning("notification_recipient_missing", user_id=user_id)
        return {"skipped": True, "user_id": user_id}

    try:
        results = NotificationService().send_notification(
            user=user, title=title, message=message, channels=channels
        )
    except Exception as exc:
        logger.error("notification_send_error", user_id=user_id, error=str(exc))
        raise self.retry(exc=exc) from exc

    failed = [channel for channel, ok in results.items() if not ok]
    if failed:
        logger.warning(
            "notification_delivery_failed", user_id=user_id, channels=failed
        )
        raise self.retry(
            exc=RuntimeError(f"Delivery failed on channels: {', '.join(failed)}")
        )

    logger.info("notification_sent", user_id=user_id, results=results)
    return results
