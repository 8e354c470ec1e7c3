# propertyhub/services/notification/providers.py
"""
Outbound email for notifications.

With SENDGRID_API_KEY set, mail goes through the SendGrid Web API. Otherwise
the configured Django EMAIL_BACKEND delivers it (console in development,
SMTP in production, locmem under test). Providers report failure by
returning False; they do not raise.
"""

import logging
import smtplib
from abc import ABC, abstractmethod
from typing import Any

from django.core.mail import send_mail
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Content, Email, Mail, To

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "PropertyHub notification"


class NotificationProvider(ABC):
    def __init__(self, default_from_email: str):
        self.default_from_email = default_from_email

    @abstractmethod
    def send(
        self, recipient: str, message: str, subject: str | None = None, **kwargs
    ) -> bool:
        """Deliver ``message`` to ``recipient``; True once the provider accepted it."""

    def validate_config(self) -> bool:
        return bool(self.default_from_email)


class SendGridProvider(NotificationProvider):
    ACCEPTED = frozenset({200, 201, 202})

    def __init__(self, api_key: str, default_from_email: str):
        super().__init__(default_from_email)
        self.api_key = api_key

    def validate_config(self) -> bool:
        return bool(self.api_key) and super().validate_config()

    def send(
        self, recipient: str, message: str, subject: str | None = None, **kwargs
    ) -> bool:
        if not self.validate_config():
            logger.warning("SendGrid is not configured; skipping email to %s", recipient)
            return False

        html = kwargs.get("html_content")
        body = Content("text/html", html) if html else Content("text/plain", message)
        mail = Mail(
            Email(self.default_from_email), To(recipient), subject or DEFAULT_SUBJECT, body
        )
        try:
            response = SendGridAPIClient(api_key=self.api_key).send(mail)
        except Exception:
            # python-http-client raises one HTTPError subclass per status code
            logger.exception("SendGrid request for %s failed", recipient)
            return False

        if response.status_code not in self.ACCEPTED:
            logger.error(
                "SendGrid rejected email to %s with status %s",
                recipient,
                response.status_code,
            )
            return False

        logger.info("Email to %s accepted by SendGrid", recipient)
        return True


class DjangoEmailProvider(NotificationProvider):
    def send(
        self, recipient: str, message: str, subject: str | None = None, **kwargs
    ) -> bool:
        try:
            delivered = send_mail(
                subject or DEFAULT_SUBJECT,
                message,
                self.default_from_email,
                [recipient],
                html_message=kwargs.get("html_content"),
            )
        except (smtplib.SMTPException, OSError):
            logger.exception("Email backend could not deliver to %s", recipient)
            return False
        return delivered == 1


class NotificationProviderFactory:
    """Maps a channel name to a provider; ``email`` is the only channel."""

    @staticmethod
    def get_provider(provider_type: str, config: dict[str, Any]) -> NotificationProvider:
        if provider_type != "email":
            raise ValueError(f"Unknown provider type: {provider_type}")

        from_email = config.get("DEFAULT_FROM_EMAIL", "")
        if config.get("SENDGRID_API_KEY"):
            return SendGridProvider(config["SENDGRID_API_KEY"], from_email)
        return DjangoEmailProvider(from_email)
