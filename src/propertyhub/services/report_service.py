# report_service.py
"""
User reports against listings and automatic escalation to Flagged.

A report is stored, the listing's report_count incremented and, once the
count reaches LISTING_REPORT_FLAG_THRESHOLD, the listing moved to Flagged,
all inside one transaction holding a row lock on the listing. Admins are
then notified on a best-effort basis.
"""

from django.conf import settings
from django.db import IntegrityError, transaction

from propertyhub.exceptions import ConflictError, InvalidRequestError, NotFoundError
from propertyhub.models import (
    Listing,
    ListingReport,
    NotificationType,
    RelatedObjectType,
)
from propertyhub.services.notification import NotificationService, notify_best_effort
from propertyhubutils.log_helpers import log_moderation_event

DUPLICATE_REPORT_MESSAGE = "You have already reported this property"


class ReportService:
    """
    Service for submitting and listing reports against listings.

    Usage:
        service = ReportService()
        report = service.submit_report(listing_id, request.user_id, reason)
    """

    def __init__(
        self,
        notifier: NotificationService | None = None,
        flag_threshold: int | None = None,
    ):
        self.notifier = notifier or NotificationService()
        if flag_threshold is None:
            flag_threshold = settings.LISTING_REPORT_FLAG_THRESHOLD
        self.flag_threshold = flag_threshold

    def submit_report(
        self, listing_id: int, reporter_id: int, reason: str | None
    ) -> ListingReport:
        """
        Record a report from ``reporter_id`` against a listing.

        Raises:
            NotFoundError: listing does not exist
            InvalidRequestError: reason is empty or blank
            ConflictError: the reporter already reported this listing
        """
        reason = (reason or "").strip()

        with transaction.atomic():
            try:
                listing = (
                    Listing.objects.alive()
                    .select_for_update()
                    .get(listing_id=listing_id)
                )
            except Listing.DoesNotExist:
                raise NotFoundError("Property not found") from None

            if not reason:
                raise InvalidRequestError("Reason is required")

            if ListingReport.objects.filter(
                listing=listing, reporter_id=reporter_id
            ).exists():
                raise ConflictError(DUPLICATE_REPORT_MESSAGE)

            # A concurrent duplicate trips the unique constraint instead
            try:
                with transaction.atomic():
                    report = ListingReport.objects.create(
                        listing=listing,
                        reporter_id=reporter_id,
                        reason=reason,
                        created_by=reporter_id,
                    )
            except IntegrityError:
                raise ConflictError(DUPLICATE_REPORT_MESSAGE) from None

            listing.report_count += 1
            escalated = listing.escalate_if_reported(self.flag_threshold)
            listing.updated_by = reporter_id
            listing.save(
                update_fields=[
                    "report_count",
                    "moderation_status",
                    "updated_by",
                    "updated_at",
                ]
            )

        log_moderation_event(
            "listing_reported",
            listing_id=listing.listing_id,
            user_id=reporter_id,
            status=listing.moderation_status,
            report_count=listing.report_count,
        )
        if escalated:
            log_moderation_event(
                "listing_flagged",
                listing_id=listing.listing_id,
                status=listing.moderation_status,
                report_count=listing.report_count,
                threshold=self.flag_threshold,
            )

        self._notify_admins_of_report(listing, reporter_id)
        return report

    def list_reports(self, listing_id: int):
        """Reports filed against a listing, newest first."""
        if not Listing.objects.alive().filter(listing_id=listing_id).exists():
            raise NotFoundError("Property not found")

        return (
            ListingReport.objects.filter(listing_id=listing_id, is_deleted=0)
            .select_related("reporter")
            .order_by("-reported_at", "-report_id")
        )

    def _notify_admins_of_report(self, listing: Listing, reporter_id: int) -> None:
        notify_best_effort(
            self.notifier.notify_admins,
            title="Property Reported",
            message=(
                f'A property "{listing.title}" has been reported '
                "and may require review."
            ),
            notification_type=NotificationType.WARNING.value,
            related_type=RelatedObjectType.PROPERTY.value,
            related_id=listing.listing_id,
            created_by=reporter_id,
        )
