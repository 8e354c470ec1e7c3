"""
Unit tests for Django models.

Tests cover users and roles, listing visibility and report escalation,
the one-report-per-user constraint and notification validation.
"""

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from propertyhub.models import (
    AppealStatus,
    ListingAppeal,
    ListingReport,
    ModerationStatus,
    Notification,
    Role,
    User,
)

# =============================================================================
# USER MODEL TESTS
# =============================================================================


@pytest.mark.unit
class TestUser:
    """Tests for User model (AbstractBaseUser)."""

    def test_create_user(self):
        """Test creating a standard user via UserManager."""
        user = User.objects.create_user(
            email="user@example.com",
            password="testpass123",
            full_name="Test User",
        )
        assert user.email == "user@example.com"
        assert user.role == Role.USER
        assert not user.is_staff
        assert user.check_password("testpass123")
        assert user.is_active == 1
        assert user.is_deleted == 0

    def test_create_user_requires_email(self):
        with pytest.raises(ValueError):
            User.objects.create_user(email="", password="x", full_name="No Email")

    def test_create_superuser_is_admin(self, admin_user):
        assert admin_user.role == Role.ADMIN
        assert admin_user.is_staff
        assert admin_user.is_superuser
        assert admin_user.is_admin()

    def test_role_helpers(self, agent_user, test_user, admin_user):
        assert agent_user.is_agent()
        assert agent_user.can_publish_listings()
        assert admin_user.can_publish_listings()
        assert not test_user.can_publish_listings()
        assert not test_user.is_agent()

    def test_active_admins_excludes_deleted(self, admin_user):
        deleted_admin = User.objects.create_user(
            email="gone@example.com",
            password="x",
            full_name="Gone Admin",
            role=Role.ADMIN,
        )
        deleted_admin.soft_delete()

        assert list(User.objects.active_admins()) == [admin_user]

    def test_clean_rejects_invalid_email(self):
        user = User(email="not-an-email", full_name="Bad Email")
        with pytest.raises(ValidationError):
            user.clean()

    def test_str(self, test_user):
        assert str(test_user) == "Test User <testuser@example.com>"


# =============================================================================
# LISTING MODEL TESTS
# =============================================================================


@pytest.mark.unit
class TestListingVisibility:
    """Tests for Listing.is_visible_to."""

    def test_approved_listing_is_public(self, approved_listing):
        assert approved_listing.is_visible_to(None)

    def test_pending_listing_hidden_from_anonymous(self, pending_listing):
        from django.contrib.auth.models import AnonymousUser

        assert not pending_listing.is_visible_to(None)
        assert not pending_listing.is_visible_to(AnonymousUser())

    def test_pending_listing_visible_to_owner_and_admin(
        self, pending_listing, agent_user, admin_user
    ):
        assert pending_listing.is_visible_to(agent_user)
        assert pending_listing.is_visible_to(admin_user)

    def test_pending_listing_hidden_from_other_users(
        self, pending_listing, other_agent, test_user
    ):
        assert not pending_listing.is_visible_to(other_agent)
        assert not pending_listing.is_visible_to(test_user)


@pytest.mark.unit
class TestListingEscalation:
    """Tests for Listing.escalate_if_reported."""

    def test_below_threshold_does_nothing(self, approved_listing):
        approved_listing.report_count = 2

        assert approved_listing.escalate_if_reported(3) is False
        assert approved_listing.moderation_status == ModerationStatus.APPROVED.value

    @pytest.mark.parametrize("status", ["Pending", "Approved"])
    def test_reaching_threshold_flags(self, make_listing, status):
        listing = make_listing(moderation_status=status)
        listing.report_count = 3

        assert listing.escalate_if_reported(3) is True
        assert listing.moderation_status == ModerationStatus.FLAGGED.value

    def test_already_flagged_is_not_escalated_again(self, make_listing):
        listing = make_listing(moderation_status="Flagged")
        listing.report_count = 4

        assert listing.escalate_if_reported(3) is False
        assert listing.moderation_status == ModerationStatus.FLAGGED.value

    def test_rejected_listing_is_never_flagged(self, rejected_listing):
        rejected_listing.report_count = 10

        assert rejected_listing.escalate_if_reported(3) is False
        assert rejected_listing.moderation_status == ModerationStatus.REJECTED.value

    def test_queryset_helpers(self, approved_listing, pending_listing, make_listing):
        from propertyhub.models import Listing

        flagged = make_listing(moderation_status="Flagged")
        deleted = make_listing(moderation_status="Pending")
        deleted.soft_delete()

        assert list(Listing.objects.approved()) == [approved_listing]
        assert set(Listing.objects.awaiting_review()) == {pending_listing, flagged}


# =============================================================================
# REPORT / APPEAL MODEL TESTS
# =============================================================================


@pytest.mark.unit
class TestListingReport:
    """Tests for ListingReport."""

    def test_one_report_per_user_per_listing(self, approved_listing, test_user):
        ListingReport.objects.create(
            listing=approved_listing, reporter=test_user, reason="Spam"
        )

        with pytest.raises(IntegrityError), transaction.atomic():
            ListingReport.objects.create(
                listing=approved_listing, reporter=test_user, reason="Spam again"
            )

    def test_same_user_may_report_different_listings(
        self, approved_listing, pending_listing, test_user
    ):
        ListingReport.objects.create(
            listing=approved_listing, reporter=test_user, reason="Spam"
        )
        ListingReport.objects.create(
            listing=pending_listing, reporter=test_user, reason="Spam"
        )

        assert test_user.listing_reports.count() == 2


@pytest.mark.unit
class TestListingAppeal:
    def test_defaults_to_pending(self, rejected_listing, agent_user):
        appeal = ListingAppeal.objects.create(
            listing=rejected_listing, agent=agent_user, reason="Fixed the wording"
        )

        assert appeal.status == AppealStatus.PENDING.value
        assert appeal.reviewed_by is None
        assert appeal.admin_notes == ""


# =============================================================================
# NOTIFICATION MODEL TESTS
# =============================================================================


@pytest.mark.unit
class TestNotification:
    """Tests for Notification model."""

    def test_mark_as_read(self, test_user):
        notification = Notification.objects.create(
            user=test_user, title="Hello", message="World"
        )

        notification.mark_as_read(user_id=test_user.user_id)
        notification.refresh_from_db()

        assert notification.is_read == 1
        assert notification.updated_by == test_user.user_id

    def test_invalid_type_rejected(self, test_user):
        notification = Notification(
            user=test_user, title="Hello", message="World", type="urgent"
        )
        with pytest.raises(ValidationError):
            notification.full_clean()

    def test_related_fields_must_be_set_together(self, test_user):
        notification = Notification(
            user=test_user, title="Hello", message="World", related_type="property"
        )
        with pytest.raises(ValidationError):
            notification.full_clean()
