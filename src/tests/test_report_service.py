"""
Unit tests for ReportService: report submission and automatic escalation.
"""

import pytest

from propertyhub.exceptions import ConflictError, InvalidRequestError, NotFoundError
from propertyhub.models import ListingReport, ModerationStatus, Notification
from propertyhub.services.report_service import (
    DUPLICATE_REPORT_MESSAGE,
    ReportService,
)


def _report_all(service, listing, users, reason="Looks like a scam"):
    return [
        service.submit_report(listing.listing_id, user.user_id, reason)
        for user in users
    ]


@pytest.mark.unit
class TestSubmitReport:
    """Tests for ReportService.submit_report."""

    def test_first_report_recorded(self, approved_listing, test_user):
        report = ReportService().submit_report(
            approved_listing.listing_id, test_user.user_id, "  Fake photos  "
        )

        approved_listing.refresh_from_db()
        assert report.reason == "Fake photos"
        assert report.reporter_id == test_user.user_id
        assert report.created_by == test_user.user_id
        assert approved_listing.report_count == 1
        assert approved_listing.moderation_status == ModerationStatus.APPROVED.value

    def test_duplicate_report_conflicts(self, approved_listing, test_user):
        service = ReportService()
        service.submit_report(approved_listing.listing_id, test_user.user_id, "Spam")

        with pytest.raises(ConflictError) as exc_info:
            service.submit_report(
                approved_listing.listing_id, test_user.user_id, "Spam again"
            )

        approved_listing.refresh_from_db()
        assert exc_info.value.message == DUPLICATE_REPORT_MESSAGE
        assert approved_listing.report_count == 1
        assert ListingReport.objects.filter(listing=approved_listing).count() == 1

    def test_unknown_listing(self, test_user):
        with pytest.raises(NotFoundError):
            ReportService().submit_report(999999, test_user.user_id, "Spam")

    def test_deleted_listing_not_found(self, approved_listing, test_user):
        approved_listing.soft_delete()

        with pytest.raises(NotFoundError):
            ReportService().submit_report(
                approved_listing.listing_id, test_user.user_id, "Spam"
            )

    @pytest.mark.parametrize("reason", ["", "   ", None])
    def test_blank_reason_rejected(self, approved_listing, test_user, reason):
        with pytest.raises(InvalidRequestError):
            ReportService().submit_report(
                approved_listing.listing_id, test_user.user_id, reason
            )

        approved_listing.refresh_from_db()
        assert approved_listing.report_count == 0

    def test_not_found_checked_before_reason(self, test_user):
        with pytest.raises(NotFoundError):
            ReportService().submit_report(999999, test_user.user_id, "")


@pytest.mark.unit
class TestEscalation:
    """Listings are flagged once enough distinct users report them."""

    def test_flagged_at_threshold(self, approved_listing, reporters):
        service = ReportService()

        _report_all(service, approved_listing, reporters[:2])
        approved_listing.refresh_from_db()
        assert approved_listing.moderation_status == ModerationStatus.APPROVED.value

        service.submit_report(
            approved_listing.listing_id, reporters[2].user_id, "Misleading"
        )
        approved_listing.refresh_from_db()
        assert approved_listing.report_count == 3
        assert approved_listing.moderation_status == ModerationStatus.FLAGGED.value

    def test_reports_beyond_threshold_keep_counting(self, pending_listing, reporters):
        _report_all(ReportService(), pending_listing, reporters[:4])

        pending_listing.refresh_from_db()
        assert pending_listing.report_count == 4
        assert pending_listing.moderation_status == ModerationStatus.FLAGGED.value

    def test_rejected_listing_is_not_flagged(self, rejected_listing, reporters):
        _report_all(ReportService(), rejected_listing, reporters)

        rejected_listing.refresh_from_db()
        assert rejected_listing.report_count == 5
        assert rejected_listing.moderation_status == ModerationStatus.REJECTED.value

    def test_custom_threshold(self, approved_listing, test_user):
        ReportService(flag_threshold=1).submit_report(
            approved_listing.listing_id, test_user.user_id, "Spam"
        )

        approved_listing.refresh_from_db()
        assert approved_listing.moderation_status == ModerationStatus.FLAGGED.value

    def test_threshold_from_settings(self, approved_listing, reporters, settings):
        settings.LISTING_REPORT_FLAG_THRESHOLD = 5

        _report_all(ReportService(), approved_listing, reporters[:4])

        approved_listing.refresh_from_db()
        assert approved_listing.moderation_status == ModerationStatus.APPROVED.value

    def test_report_count_matches_stored_reports(self, approved_listing, reporters):
        service = ReportService()
        _report_all(service, approved_listing, reporters[:3])
        with pytest.raises(ConflictError):
            service.submit_report(
                approved_listing.listing_id, reporters[0].user_id, "Again"
            )

        approved_listing.refresh_from_db()
        assert (
            approved_listing.report_count
            == ListingReport.objects.filter(listing=approved_listing).count()
        )


@pytest.mark.unit
class TestReportNotifications:
    def test_admins_notified(self, approved_listing, test_user, admin_user):
        ReportService().submit_report(
            approved_listing.listing_id, test_user.user_id, "Spam"
        )

        notification = Notification.objects.get(user=admin_user)
        assert notification.title == "Property Reported"
        assert notification.type == "warning"
        assert notification.related_type == "property"
        assert notification.related_id == approved_listing.listing_id
        assert approved_listing.title in notification.message

    def test_notifier_receives_report(
        self, approved_listing, test_user, recording_notifier
    ):
        ReportService(notifier=recording_notifier).submit_report(
            approved_listing.listing_id, test_user.user_id, "Spam"
        )

        assert len(recording_notifier.admin_calls) == 1
        assert recording_notifier.admin_calls[0]["created_by"] == test_user.user_id

    def test_notification_failure_keeps_report(
        self, approved_listing, reporters, failing_notifier
    ):
        service = ReportService(notifier=failing_notifier)

        _report_all(service, approved_listing, reporters[:3])

        approved_listing.refresh_from_db()
        assert approved_listing.report_count == 3
        assert approved_listing.moderation_status == ModerationStatus.FLAGGED.value
        assert ListingReport.objects.filter(listing=approved_listing).count() == 3


@pytest.mark.unit
class TestListReports:
    def test_newest_first(self, approved_listing, reporters):
        reports = _report_all(ReportService(), approved_listing, reporters[:3])

        listed = list(ReportService().list_reports(approved_listing.listing_id))

        assert [r.report_id for r in listed] == [
            r.report_id for r in reversed(reports)
        ]

    def test_unknown_listing(self):
        with pytest.raises(NotFoundError):
            ReportService().list_reports(999999)
