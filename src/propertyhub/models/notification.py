# propertyhub/models/notification.py
"""
In-app notifications.
"""

from django.core.exceptions import ValidationError
from django.db import models

from .base import BaseModel
from .choices import NotificationType, RelatedObjectType


class Notification(BaseModel):
    """
    User notification shown in the in-app inbox.

    Optionally points at the object it concerns (a listing or an appeal)
    through related_type / related_id.
    """

    notification_id = models.AutoField(
        db_column="NotificationID",
        primary_key=True,
        help_text="Primary key",
    )
    user = models.ForeignKey(
        "User",
        models.CASCADE,
        db_column="UserID",
        related_name="notifications",
        help_text="Recipient",
    )
    title = models.CharField(
        db_column="Title",
        max_length=255,
        help_text="Short headline shown in the inbox",
    )
    message = models.TextField(
        db_column="Message",
        help_text="Body text",
    )
    type = models.CharField(
        db_column="Type",
        max_length=7,
        choices=NotificationType.choices(),
        default=NotificationType.INFO.value,
        help_text="Notification severity",
    )
    related_type = models.CharField(
        db_column="RelatedType",
        max_length=10,
        choices=RelatedObjectType.choices(),
        blank=True,
        null=True,
        help_text="Kind of object the notification refers to",
    )
    related_id = models.IntegerField(
        db_column="RelatedID",
        blank=True,
        null=True,
        help_text="Primary key of the referenced object",
    )
    is_read = models.IntegerField(
        db_column="IsRead",
        default=0,
        help_text="1 once the recipient opened it",
    )

    class Meta:
        managed = True
        db_table = "Notifications"
        verbose_name = "Notification"
        verbose_name_plural = "Notifications"
        indexes = [
            models.Index(
                fields=["user", "is_read", "created_at"], name="notifications_inbox_idx"
            ),
        ]
        ordering = ["-created_at", "-notification_id"]
        app_label = "propertyhub"

    def __str__(self):
        return f"{self.type}: {self.title}"

    def clean(self):
        if self.type and self.type not in NotificationType.values():
            raise ValidationError({"type": "Invalid notification type selected."})
        if (self.related_type is None) != (self.related_id is None):
            raise ValidationError(
                {"related_id": "related_type and related_id must be set together."}
            )

    def mark_as_read(self, user_id: int | None = None):
        self.is_read = 1
        self.updated_by = user_id
        self.save(update_fields=["is_read", "updated_by", "updated_at"])
