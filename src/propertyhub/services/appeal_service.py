# appeal_service.py
"""
Agent appeals against rejected listings.
"""

from django.db import transaction
from django.utils import timezone

from propertyhub.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidRequestError,
    NotFoundError,
)
from propertyhub.models import (
    AppealStatus,
    Listing,
    ListingAppeal,
    ModerationStatus,
    NotificationType,
    RelatedObjectType,
    User,
)
from propertyhub.services.notification import NotificationService, notify_best_effort
from propertyhubutils.log_helpers import log_moderation_event


class AppealService:
    """
    Service for submitting, resolving and listing appeals.

    An agent may appeal one of their Rejected listings while no other appeal
    for it is pending. Approving an appeal approves the listing.
    """

    def __init__(self, notifier: NotificationService | None = None):
        self.notifier = notifier or NotificationService()

    def submit_appeal(
        self, listing_id: int, agent: User, reason: str | None
    ) -> ListingAppeal:
        if not agent.is_agent():
            raise ForbiddenError("Only agents can submit appeals")

        reason = (reason or "").strip()
        if not listing_id or not reason:
            raise InvalidRequestError("Property ID and reason are required")

        with transaction.atomic():
            try:
                listing = (
                    Listing.objects.alive()
                    .select_for_update()
                    .get(listing_id=listing_id)
                )
            except Listing.DoesNotExist:
                raise NotFoundError("Property not found") from None

            if listing.agent_id != agent.user_id:
                raise ForbiddenError("You can only appeal your own listings")

            if listing.moderation_status != ModerationStatus.REJECTED.value:
                raise InvalidRequestError("Only rejected properties can be appealed")

            if listing.appeals.filter(
                status=AppealStatus.PENDING.value, is_deleted=0
            ).exists():
                raise ConflictError("An appeal for this property is already pending")

            appeal = ListingAppeal.objects.create(
                listing=listing,
                agent=agent,
                reason=reason,
                created_by=agent.user_id,
            )

        log_moderation_event(
            "appeal_submitted",
            listing_id=listing.listing_id,
            user_id=agent.user_id,
            status=appeal.status,
            appeal_id=appeal.appeal_id,
        )

        notify_best_effort(
            self.notifier.notify_admins,
            title="New Property Appeal",
            message=(
                f'An appeal has been submitted for property "{listing.title}" '
                "and requires review."
            ),
            notification_type=NotificationType.INFO.value,
            related_type=RelatedObjectType.APPEAL.value,
            related_id=appeal.appeal_id,
            created_by=agent.user_id,
        )
        return appeal

    def resolve_appeal(
        self,
        appeal_id: int,
        admin: User,
        status: str | None,
        admin_notes: str | None = None,
    ) -> ListingAppeal:
        if not admin.is_admin():
            raise ForbiddenError("Only admins can update appeals")

        if status not in AppealStatus.resolutions():
            raise InvalidRequestError(
                "Status is required and must be Approved or Rejected"
            )

        with transaction.atomic():
            try:
                appeal = (
                    ListingAppeal.objects.select_for_update()
                    .select_related("listing", "agent")
                    .get(appeal_id=appeal_id, is_deleted=0)
                )
            except ListingAppeal.DoesNotExist:
                raise NotFoundError("Appeal not found") from None

            if appeal.status != AppealStatus.PENDING.value:
                raise ConflictError("Appeal has already been resolved")

            appeal.status = status
            if admin_notes:
                appeal.admin_notes = admin_notes
            appeal.reviewed_by = admin
            appeal.reviewed_at = timezone.now()
            appeal.updated_by = admin.user_id
            appeal.save()

            if status == AppealStatus.APPROVED.value:
                listing = appeal.listing
                listing.moderation_status = ModerationStatus.APPROVED.value
                listing.updated_by = admin.user_id
                listing.save(
                    update_fields=["moderation_status", "updated_by", "updated_at"]
                )

        log_moderation_event(
            "appeal_resolved",
            listing_id=appeal.listing_id,
            user_id=admin.user_id,
            status=status,
            appeal_id=appeal.appeal_id,
        )

        title = appeal.listing.title
        if status == AppealStatus.APPROVED.value:
            message = (
                f'Your appeal for property "{title}" has been approved. '
                "The property is now visible on the platform."
            )
            notification_type = NotificationType.SUCCESS.value
        else:
            message = (
                f'Your appeal for property "{title}" has been rejected. '
                "Please review the admin notes for more information."
            )
            notification_type = NotificationType.ERROR.value

        notify_best_effort(
            self.notifier.create_notification,
            user=appeal.agent,
            title=f"Appeal {status}",
            message=message,
            notification_type=notification_type,
            related_type=RelatedObjectType.APPEAL.value,
            related_id=appeal.appeal_id,
            created_by=admin.user_id,
        )
        return appeal

    def list_appeals(self, user: User, status: str | None = None):
        """Admins see every appeal, agents only their own."""
        queryset = ListingAppeal.objects.filter(is_deleted=0).select_related(
            "listing", "agent", "reviewed_by"
        )

        if not user.is_admin():
            if not user.is_agent():
                raise ForbiddenError("Only agents and admins can view appeals")
            queryset = queryset.filter(agent_id=user.user_id)

        if status:
            if status not in AppealStatus.values():
                raise InvalidRequestError(f"Invalid appeal status: {status}")
            queryset = queryset.filter(status=status)

        return queryset.order_by("-created_at", "-appeal_id")
