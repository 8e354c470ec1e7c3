# propertyhub/models/appeal.py
"""
Agent appeals against rejected listings.
"""

from django.db import models

from .base import BaseModel
from .choices import AppealStatus


class ListingAppeal(BaseModel):
    """
    Appeal submitted by an agent against the rejection of one of their listings.

    An admin resolves it; approving the appeal approves the listing.
    """

    appeal_id = models.AutoField(
        db_column="AppealID",
        primary_key=True,
        help_text="Unique identifier for the appeal",
    )
    listing = models.ForeignKey(
        "Listing",
        models.CASCADE,
        db_column="ListingID",
        related_name="appeals",
        help_text="The rejected listing being appealed",
    )
    agent = models.ForeignKey(
        "User",
        models.CASCADE,
        db_column="AgentID",
        related_name="listing_appeals",
        help_text="Agent submitting the appeal",
    )
    reason = models.TextField(
        db_column="Reason",
        help_text="Reason for the appeal",
    )
    status = models.CharField(
        db_column="Status",
        max_length=10,
        choices=AppealStatus.choices(),
        default=AppealStatus.PENDING.value,
        help_text="Current appeal status",
    )
    admin_notes = models.TextField(
        db_column="AdminNotes",
        blank=True,
        default="",
        help_text="Notes from the reviewing admin",
    )
    reviewed_by = models.ForeignKey(
        "User",
        models.SET_NULL,
        db_column="ReviewedBy",
        blank=True,
        null=True,
        related_name="reviewed_appeals",
        help_text="Admin who resolved the appeal",
    )
    reviewed_at = models.DateTimeField(
        db_column="ReviewedAt",
        blank=True,
        null=True,
        help_text="When the appeal was resolved",
    )

    class Meta:
        managed = True
        db_table = "ListingAppeals"
        verbose_name = "Listing Appeal"
        verbose_name_plural = "Listing Appeals"
        indexes = [
            models.Index(
                fields=["status", "created_at"], name="appeals_status_created_idx"
            ),
            models.Index(fields=["agent", "status"], name="appeals_agent_status_idx"),
        ]
        ordering = ["-created_at"]
        app_label = "propertyhub"

    def __str__(self):
        return f"Appeal #{self.appeal_id} for Listing #{self.listing_id} ({self.status})"
