# propertyhub/models/listing.py
"""
Property listing model.

A listing is published by an agent (or admin) and carries its moderation
state: the current status, the admin's notes and the number of distinct
users that reported it.
"""

from django.core.validators import MinValueValidator
from django.db import models

from .base import BaseModel
from .choices import ListingStatus, ModerationStatus, PropertyType


class ListingQuerySet(models.QuerySet):
    def alive(self):
        return self.filter(is_active=1, is_deleted=0)

    def approved(self):
        return self.alive().filter(moderation_status=ModerationStatus.APPROVED.value)

    def awaiting_review(self):
        return self.alive().filter(
            moderation_status__in=ModerationStatus.review_statuses()
        )


class Listing(BaseModel):
    """
    Property listing subject to moderation.

    Invariant: report_count equals the number of ListingReport rows for the
    listing; both are written in the same transaction by ReportService.
    """

    listing_id = models.AutoField(
        db_column="ListingID",
        primary_key=True,
        help_text="Unique identifier for the listing",
    )
    agent = models.ForeignKey(
        "User",
        models.CASCADE,
        db_column="AgentID",
        related_name="listings",
        help_text="Agent (or admin) who published the listing",
    )
    title = models.CharField(
        db_column="Title",
        max_length=255,
        help_text="Listing headline",
    )
    description = models.TextField(
        db_column="Description",
        help_text="Free-text listing description",
    )
    price = models.DecimalField(
        db_column="Price",
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        help_text="Asking price or monthly rent",
    )
    address = models.CharField(db_column="Address", max_length=255)
    city = models.CharField(db_column="City", max_length=100)
    state = models.CharField(db_column="State", max_length=100)
    zip_code = models.CharField(db_column="ZipCode", max_length=20)
    latitude = models.DecimalField(
        db_column="Latitude", max_digits=9, decimal_places=6, blank=True, null=True
    )
    longitude = models.DecimalField(
        db_column="Longitude", max_digits=9, decimal_places=6, blank=True, null=True
    )
    bedrooms = models.PositiveIntegerField(db_column="Bedrooms", default=0)
    bathrooms = models.DecimalField(
        db_column="Bathrooms", max_digits=4, decimal_places=1, default=0
    )
    area = models.PositiveIntegerField(
        db_column="Area", default=0, help_text="Floor area in square feet"
    )
    property_type = models.CharField(
        db_column="PropertyType",
        max_length=20,
        choices=PropertyType.choices(),
    )
    listing_status = models.CharField(
        db_column="ListingStatus",
        max_length=20,
        choices=ListingStatus.choices(),
        default=ListingStatus.FOR_SALE.value,
    )
    year_built = models.PositiveIntegerField(
        db_column="YearBuilt", blank=True, null=True
    )
    parking_spaces = models.PositiveIntegerField(db_column="ParkingSpaces", default=0)
    features = models.JSONField(
        db_column="Features",
        default=list,
        blank=True,
        help_text="List of feature labels (pool, garage, ...)",
    )
    is_featured = models.BooleanField(db_column="IsFeatured", default=False)

    # Moderation
    moderation_status = models.CharField(
        db_column="ModerationStatus",
        max_length=10,
        choices=ModerationStatus.choices(),
        default=ModerationStatus.PENDING.value,
        help_text="Visibility-governing moderation state",
    )
    moderation_notes = models.TextField(
        db_column="ModerationNotes",
        blank=True,
        null=True,
        help_text="Notes from the admin who last moderated the listing",
    )
    report_count = models.PositiveIntegerField(
        db_column="ReportCount",
        default=0,
        help_text="Number of distinct users who reported the listing",
    )
    views = models.PositiveIntegerField(db_column="Views", default=0)

    objects = ListingQuerySet.as_manager()

    class Meta:
        managed = True
        db_table = "Listings"
        verbose_name = "Listing"
        verbose_name_plural = "Listings"
        indexes = [
            models.Index(
                fields=["moderation_status", "created_at"],
                name="listings_status_created_idx",
            ),
            models.Index(
                fields=["agent", "moderation_status"], name="listings_agent_status_idx"
            ),
            models.Index(
                fields=["city", "property_type"], name="listings_city_type_idx"
            ),
        ]
        ordering = ["-created_at"]
        app_label = "propertyhub"

    def __str__(self):
        return f"Listing #{self.listing_id} - {self.title} ({self.moderation_status})"

    def is_visible_to(self, user) -> bool:
        """Approved listings are public; others only to their agent and admins."""
        if self.moderation_status == ModerationStatus.APPROVED.value:
            return True
        if user is None or not getattr(user, "is_authenticated", False):
            return False
        return user.is_admin() or user.user_id == self.agent_id

    def escalate_if_reported(self, threshold: int) -> bool:
        """
        Move the listing to Flagged once report_count reaches threshold.

        A Rejected listing is never escalated. Returns True when the status
        was changed by this call.
        """
        if self.report_count < threshold:
            return False
        if self.moderation_status in (
            ModerationStatus.REJECTED.value,
            ModerationStatus.FLAGGED.value,
        ):
            return False
        self.moderation_status = ModerationStatus.FLAGGED.value
        return True
