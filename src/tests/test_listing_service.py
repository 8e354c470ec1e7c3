"""
Unit tests for ListingService: publishing, editing, search and moderation.
"""

from decimal import Decimal

import pytest

from propertyhub.exceptions import ForbiddenError, InvalidRequestError, NotFoundError
from propertyhub.models import Listing, ModerationStatus, Notification
from propertyhub.services.listing_service import ListingService


@pytest.mark.unit
class TestCreateListing:
    """Tests for ListingService.create_listing."""

    def test_agent_listing_starts_pending(self, agent_user, listing_data):
        listing, verdict = ListingService().create_listing(agent_user, listing_data)

        assert listing.pk is not None
        assert listing.agent == agent_user
        assert listing.moderation_status == ModerationStatus.PENDING.value
        assert listing.created_by == agent_user.user_id
        assert verdict.flagged is False
        assert verdict.is_approved is True

    def test_admin_listing_starts_approved(self, admin_user, listing_data):
        listing, _ = ListingService().create_listing(admin_user, listing_data)

        assert listing.moderation_status == ModerationStatus.APPROVED.value

    def test_regular_user_cannot_publish(self, test_user, listing_data):
        with pytest.raises(ForbiddenError):
            ListingService().create_listing(test_user, listing_data)

        assert Listing.objects.count() == 0

    def test_verdict_is_advisory(self, agent_user, listing_data):
        listing_data["description"] = "Former grow house with guaranteed return"

        listing, verdict = ListingService().create_listing(agent_user, listing_data)

        assert verdict.flagged is True
        assert verdict.is_approved is False
        listing.refresh_from_db()
        assert listing.moderation_status == ModerationStatus.PENDING.value

    def test_protected_fields_ignored(self, agent_user, listing_data):
        listing_data.update(moderation_status="Approved", report_count=7, views=99)

        listing, _ = ListingService().create_listing(agent_user, listing_data)

        assert listing.moderation_status == ModerationStatus.PENDING.value
        assert listing.report_count == 0
        assert listing.views == 0

    def test_invalid_fields_rejected(self, agent_user, listing_data):
        listing_data["property_type"] = "Castle"

        with pytest.raises(InvalidRequestError) as exc_info:
            ListingService().create_listing(agent_user, listing_data)

        assert "property_type" in exc_info.value.message

    def test_admins_notified_of_pending_listing(
        self, agent_user, admin_user, listing_data
    ):
        listing, _ = ListingService().create_listing(agent_user, listing_data)

        notification = Notification.objects.get(user=admin_user)
        assert notification.title == "New Property Submission"
        assert notification.related_id == listing.listing_id

    def test_no_notification_for_admin_listing(
        self, admin_user, listing_data, recording_notifier
    ):
        ListingService(notifier=recording_notifier).create_listing(
            admin_user, listing_data
        )

        assert recording_notifier.admin_calls == []

    def test_notification_failure_does_not_fail_create(
        self, agent_user, listing_data, failing_notifier
    ):
        listing, _ = ListingService(notifier=failing_notifier).create_listing(
            agent_user, listing_data
        )

        assert Listing.objects.filter(pk=listing.pk).exists()


@pytest.mark.unit
class TestUpdateListing:
    def test_owner_can_edit(self, pending_listing, agent_user):
        listing, verdict = ListingService().update_listing(
            pending_listing.listing_id,
            agent_user,
            {"price": Decimal("199000.00"), "title": "Reduced price"},
        )

        listing.refresh_from_db()
        assert listing.price == Decimal("199000.00")
        assert listing.title == "Reduced price"
        assert listing.updated_by == agent_user.user_id
        assert verdict.flagged is False

    def test_edit_keeps_moderation_state(self, make_listing, agent_user):
        listing = make_listing(moderation_status="Flagged", report_count=3)

        ListingService().update_listing(
            listing.listing_id,
            agent_user,
            {"city": "Shelbyville", "moderation_status": "Approved"},
        )

        listing.refresh_from_db()
        assert listing.city == "Shelbyville"
        assert listing.moderation_status == ModerationStatus.FLAGGED.value
        assert listing.report_count == 3

    def test_other_agent_cannot_edit(self, pending_listing, other_agent):
        with pytest.raises(ForbiddenError):
            ListingService().update_listing(
                pending_listing.listing_id, other_agent, {"title": "Mine now"}
            )

    def test_admin_can_edit(self, pending_listing, admin_user):
        listing, _ = ListingService().update_listing(
            pending_listing.listing_id, admin_user, {"bedrooms": 3}
        )

        assert listing.bedrooms == 3

    def test_unknown_listing(self, agent_user):
        with pytest.raises(NotFoundError):
            ListingService().update_listing(999999, agent_user, {"title": "x"})


@pytest.mark.unit
class TestGetListing:
    def test_view_counted_for_visitors(self, approved_listing, test_user):
        listing = ListingService().get_listing(approved_listing.listing_id, test_user)

        assert listing.views == 1

    def test_owner_view_not_counted(self, approved_listing, agent_user):
        listing = ListingService().get_listing(approved_listing.listing_id, agent_user)

        assert listing.views == 0

    def test_pending_hidden_from_public(self, pending_listing, test_user):
        with pytest.raises(NotFoundError):
            ListingService().get_listing(pending_listing.listing_id, test_user)
        with pytest.raises(NotFoundError):
            ListingService().get_listing(pending_listing.listing_id, None)

    def test_pending_visible_to_owner(self, pending_listing, agent_user):
        listing = ListingService().get_listing(pending_listing.listing_id, agent_user)

        assert listing == pending_listing


@pytest.mark.unit
class TestListListings:
    def test_public_sees_approved_only(
        self, approved_listing, pending_listing, rejected_listing
    ):
        listings = list(ListingService().list_listings({}, user=None))

        assert listings == [approved_listing]

    def test_public_skips_soft_deleted(self, approved_listing, make_listing):
        make_listing(title="Withdrawn flat").soft_delete()

        assert list(ListingService().list_listings({})) == [approved_listing]

    def test_public_cannot_filter_by_status(self, approved_listing, pending_listing):
        listings = list(
            ListingService().list_listings({"moderation_status": "Pending"})
        )

        assert listings == [approved_listing]

    def test_admin_filters_by_status(
        self, admin_user, approved_listing, pending_listing
    ):
        listings = list(
            ListingService().list_listings(
                {"moderation_status": "Pending"}, user=admin_user
            )
        )

        assert listings == [pending_listing]

    def test_admin_invalid_status(self, admin_user):
        with pytest.raises(InvalidRequestError):
            ListingService().list_listings(
                {"moderation_status": "Archived"}, user=admin_user
            )

    def test_mine_returns_own_listings(
        self, agent_user, other_agent, pending_listing, make_listing
    ):
        make_listing(agent=other_agent, moderation_status="Approved")

        listings = list(
            ListingService().list_listings({"mine": True}, user=agent_user)
        )

        assert listings == [pending_listing]

    def test_filters(self, make_listing):
        cheap = make_listing(city="Springfield", price=Decimal("100000"))
        make_listing(city="Springfield", price=Decimal("900000"))
        make_listing(city="Capital City", price=Decimal("100000"))
        make_listing(
            city="Springfield", price=Decimal("90000"), property_type="House"
        )

        listings = list(
            ListingService().list_listings(
                {
                    "city": "springfield",
                    "property_type": "Apartment",
                    "max_price": "500000",
                    "min_price": "95000",
                }
            )
        )

        assert listings == [cheap]

    def test_bad_price_filter(self):
        with pytest.raises(InvalidRequestError):
            ListingService().list_listings({"min_price": "cheap"})


@pytest.mark.unit
class TestCheckContent:
    def test_requires_content(self):
        with pytest.raises(InvalidRequestError):
            ListingService().check_content(title="", text="")

    def test_flags_text(self):
        result = ListingService().check_content(text="No section 8 tenants")

        assert result["is_flagged"] is True
        assert result["reasons"] == ['Contains prohibited term: "no section 8"']


@pytest.mark.unit
class TestModerateListing:
    """Tests for admin moderation decisions."""

    @pytest.mark.parametrize(
        "action, expected",
        [("approve", "Approved"), ("reject", "Rejected"), ("flag", "Flagged")],
    )
    def test_actions(self, pending_listing, admin_user, action, expected):
        listing = ListingService().moderate_listing(
            pending_listing.listing_id, admin_user, action
        )

        listing.refresh_from_db()
        assert listing.moderation_status == expected
        assert listing.updated_by == admin_user.user_id

    def test_notes_stored(self, pending_listing, admin_user):
        ListingService().moderate_listing(
            pending_listing.listing_id, admin_user, "reject", notes="Blurry photos"
        )

        pending_listing.refresh_from_db()
        assert pending_listing.moderation_notes == "Blurry photos"

    def test_invalid_action(self, pending_listing, admin_user):
        with pytest.raises(InvalidRequestError):
            ListingService().moderate_listing(
                pending_listing.listing_id, admin_user, "delete"
            )

    def test_non_admin_forbidden(self, pending_listing, agent_user):
        with pytest.raises(ForbiddenError):
            ListingService().moderate_listing(
                pending_listing.listing_id, agent_user, "approve"
            )

    def test_unknown_listing(self, admin_user):
        with pytest.raises(NotFoundError):
            ListingService().moderate_listing(999999, admin_user, "approve")

    def test_agent_notified_on_approval(self, pending_listing, admin_user, agent_user):
        ListingService().moderate_listing(
            pending_listing.listing_id, admin_user, "approve"
        )

        notification = Notification.objects.get(user=agent_user)
        assert notification.title == "Property Approved"
        assert notification.type == "success"

    def test_agent_notified_on_rejection_with_notes(
        self, pending_listing, admin_user, agent_user
    ):
        ListingService().moderate_listing(
            pending_listing.listing_id, admin_user, "reject", notes="Wrong address"
        )

        notification = Notification.objects.get(user=agent_user)
        assert notification.title == "Property Rejected"
        assert notification.type == "error"
        assert "Wrong address" in notification.message

    def test_flag_does_not_notify_agent(
        self, pending_listing, admin_user, recording_notifier
    ):
        ListingService(notifier=recording_notifier).moderate_listing(
            pending_listing.listing_id, admin_user, "flag"
        )

        assert recording_notifier.user_calls == []


@pytest.mark.unit
class TestModerationQueue:
    def test_default_queue_order(self, make_listing, approved_listing):
        pending_old = make_listing(moderation_status="Pending")
        pending_new = make_listing(moderation_status="Pending")
        flagged = make_listing(moderation_status="Flagged", report_count=4)
        make_listing(moderation_status="Rejected")

        queue = ListingService().get_moderation_queue()

        assert queue == [flagged, pending_old, pending_new]

    def test_soft_deleted_listing_leaves_queue(self, make_listing):
        kept = make_listing(moderation_status="Pending")
        make_listing(moderation_status="Flagged", report_count=5).soft_delete()

        assert ListingService().get_moderation_queue() == [kept]

    def test_status_filter(self, make_listing):
        make_listing(moderation_status="Pending")
        flagged = make_listing(moderation_status="Flagged", report_count=3)

        assert ListingService().get_moderation_queue(status="Flagged") == [flagged]

    def test_limit(self, make_listing):
        for _ in range(3):
            make_listing(moderation_status="Pending")

        assert len(ListingService().get_moderation_queue(limit=2)) == 2

    def test_invalid_arguments(self):
        with pytest.raises(InvalidRequestError):
            ListingService().get_moderation_queue(status="Archived")
        with pytest.raises(InvalidRequestError):
            ListingService().get_moderation_queue(limit=0)
