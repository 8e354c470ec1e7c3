# propertyhubutils/log_helpers.py
"""Small logging helpers shared by the services and the request middleware."""

from typing import Any

from django.http import HttpRequest

from .logging import get_logger

logger = get_logger("propertyhub.moderation")


def get_client_ip(request: HttpRequest) -> str:
    """First address of X-Forwarded-For when behind a proxy, else REMOTE_ADDR."""
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
    if forwarded:
        return forwarded.split(",", 1)[0].strip()
    return request.META.get("REMOTE_ADDR", "")


def log_moderation_event(
    event_type: str,
    listing_id: int | None = None,
    user_id: int | None = None,
    status: str | None = None,
    **extra: Any,
) -> None:
    """
    Emit one ``moderation_event`` entry for a report, flag, decision or appeal.

    Fields left as None are omitted so the JSON stays compact::

        log_moderation_event("listing_flagged", listing_id=12, status="Flagged", report_count=3)
    """
    fields = {"listing_id": listing_id, "user_id": user_id, "status": status}
    context = {key: value for key, value in fields.items() if value is not None}
    logger.info("moderation_event", moderation_event=event_type, **context, **extra)
