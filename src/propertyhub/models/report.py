# propertyhub/models/report.py
"""
User reports against listings.
"""

from django.db import models
from django.utils import timezone

from .base import BaseModel


class ListingReport(BaseModel):
    """
    A single user's report against a listing.

    At most one report exists per (listing, reporter); the unique constraint
    backs the duplicate check made by ReportService under concurrent reporters.
    """

    report_id = models.AutoField(
        db_column="ReportID",
        primary_key=True,
        help_text="Unique identifier for the report",
    )
    listing = models.ForeignKey(
        "Listing",
        models.CASCADE,
        db_column="ListingID",
        related_name="reports",
        help_text="Reported listing",
    )
    reporter = models.ForeignKey(
        "User",
        models.CASCADE,
        db_column="ReporterID",
        related_name="listing_reports",
        help_text="User who filed the report",
    )
    reason = models.TextField(
        db_column="Reason",
        help_text="Why the user reported the listing",
    )
    reported_at = models.DateTimeField(
        db_column="ReportedAt",
        default=timezone.now,
        help_text="When the report was filed",
    )

    class Meta:
        managed = True
        db_table = "ListingReports"
        verbose_name = "Listing Report"
        verbose_name_plural = "Listing Reports"
        constraints = [
            models.UniqueConstraint(
                fields=["listing", "reporter"], name="unique_report_per_reporter"
            ),
        ]
        indexes = [
            models.Index(
                fields=["listing", "reported_at"], name="reports_listing_time_idx"
            ),
        ]
        ordering = ["reported_at", "report_id"]
        app_label = "propertyhub"

    def __str__(self):
        return (
            f"Report #{self.report_id} on Listing #{self.listing_id} "
            f"by User #{self.reporter_id}"
        )
