# propertyhub/models/base.py
"""Bookkeeping columns carried by every PropertyHub table."""

from django.db import models


class BaseModel(models.Model):
    """
    Activity and soft-delete flags plus audit columns.

    The flags are integers (1/0) and ``created_by``/``updated_by`` hold plain
    user ids rather than foreign keys, so audit data survives user removal.
    """

    is_active = models.IntegerField(
        db_column="IsActive",
        blank=True,
        null=True,
        default=1,
        help_text="1 while the row is in use, 0 once deactivated",
    )
    is_deleted = models.IntegerField(
        db_column="IsDeleted",
        blank=True,
        null=True,
        default=0,
        help_text="1 once the row is soft-deleted",
    )
    created_at = models.DateTimeField(
        db_column="CreatedAt",
        auto_now_add=True,
        null=True,
        help_text="Row creation time",
    )
    updated_at = models.DateTimeField(
        db_column="UpdatedAt",
        auto_now=True,
        null=True,
        help_text="Last modification time",
    )
    created_by = models.IntegerField(
        db_column="CreatedBy",
        blank=True,
        null=True,
        help_text="user_id of the creator",
    )
    updated_by = models.IntegerField(
        db_column="UpdatedBy",
        blank=True,
        null=True,
        help_text="user_id of the last editor",
    )

    class Meta:
        abstract = True
        get_latest_by = "created_at"

    def soft_delete(self) -> None:
        """Hide the row from every ``alive()``/``active()`` query; nothing is removed."""
        self.is_active, self.is_deleted = 0, 1
        self.save(update_fields=["is_active", "is_deleted", "updated_at"])
