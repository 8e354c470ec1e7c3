# listing_service.py
"""
Listing management and admin moderation decisions.

The keyword moderator runs on every create and edit; its verdict is returned
to the caller alongside the listing and never changes moderation_status.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import F

from propertyhub.exceptions import ForbiddenError, InvalidRequestError, NotFoundError
from propertyhub.models import (
    Listing,
    ModerationStatus,
    NotificationType,
    RelatedObjectType,
    User,
)
from propertyhub.services.moderation import (
    ListingModerator,
    ListingVerdict,
    get_default_moderator,
)
from propertyhub.services.notification import NotificationService, notify_best_effort
from propertyhubutils.log_helpers import log_moderation_event

logger = logging.getLogger(__name__)

# Fields an agent may set on create and change on edit. Moderation state,
# report counters, views and ownership are managed by the platform.
EDITABLE_FIELDS = (
    "title",
    "description",
    "price",
    "address",
    "city",
    "state",
    "zip_code",
    "latitude",
    "longitude",
    "bedrooms",
    "bathrooms",
    "area",
    "property_type",
    "listing_status",
    "year_built",
    "parking_spaces",
    "features",
    "is_featured",
)

MODERATION_ACTIONS = {
    "approve": ModerationStatus.APPROVED.value,
    "reject": ModerationStatus.REJECTED.value,
    "flag": ModerationStatus.FLAGGED.value,
}


def _validation_message(error: ValidationError) -> str:
    if hasattr(error, "message_dict"):
        return "; ".join(
            f"{field}: {' '.join(messages)}"
            for field, messages in error.message_dict.items()
        )
    return " ".join(error.messages)


def _parse_price(value: Any, name: str) -> Decimal | None:
    if value in (None, ""):
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise InvalidRequestError(f"{name} must be a number") from None


class ListingService:
    """
    Service for creating, editing, reading and moderating listings.

    Usage:
        service = ListingService()
        listing, verdict = service.create_listing(request.user, data)
    """

    def __init__(
        self,
        moderator: ListingModerator | None = None,
        notifier: NotificationService | None = None,
    ):
        self.moderator = moderator or get_default_moderator()
        self.notifier = notifier or NotificationService()

    # -------------------------------------------------------------------------
    # Agent operations
    # -------------------------------------------------------------------------

    def create_listing(
        self, agent: User, data: dict[str, Any]
    ) -> tuple[Listing, ListingVerdict]:
        """
        Publish a new listing.

        Listings created by admins start Approved, all others Pending and
        wait in the moderation queue.

        Raises:
            ForbiddenError: the user is neither an agent nor an admin
            InvalidRequestError: field validation failed
        """
        if not agent.can_publish_listings():
            raise ForbiddenError("Only agents and admins can create listings")

        status = (
            ModerationStatus.APPROVED.value
            if agent.is_admin()
            else ModerationStatus.PENDING.value
        )
        listing = Listing(
            agent=agent,
            moderation_status=status,
            created_by=agent.user_id,
            **{key: value for key, value in data.items() if key in EDITABLE_FIELDS},
        )
        self._validate(listing)

        verdict = self.moderator.score_listing(listing.title, listing.description)
        listing.save()

        log_moderation_event(
            "listing_created",
            listing_id=listing.listing_id,
            user_id=agent.user_id,
            status=listing.moderation_status,
            flagged=verdict.flagged,
            moderation_score=verdict.moderation_score,
        )

        if listing.moderation_status == ModerationStatus.PENDING.value:
            notify_best_effort(
                self.notifier.notify_admins,
                title="New Property Submission",
                message=(
                    f'A new property "{listing.title}" has been submitted '
                    "and requires moderation."
                ),
                notification_type=NotificationType.INFO.value,
                related_type=RelatedObjectType.PROPERTY.value,
                related_id=listing.listing_id,
                created_by=agent.user_id,
            )

        return listing, verdict

    def update_listing(
        self, listing_id: int, user: User, data: dict[str, Any]
    ) -> tuple[Listing, ListingVerdict]:
        """
        Edit a listing's descriptive fields.

        Only the owning agent or an admin may edit. Moderation status and
        report counters are left untouched.
        """
        listing = self._get_alive(listing_id)
        if not (user.is_admin() or listing.agent_id == user.user_id):
            raise ForbiddenError("You can only edit your own listings")

        changed = [key for key in data if key in EDITABLE_FIELDS]
        for key in changed:
            setattr(listing, key, data[key])
        listing.updated_by = user.user_id
        self._validate(listing)

        listing.save(update_fields=[*changed, "updated_by", "updated_at"])
        verdict = self.moderator.score_listing(listing.title, listing.description)

        logger.info(
            "Listing %s updated by user %s (fields: %s)",
            listing.listing_id,
            user.user_id,
            ", ".join(changed) or "none",
        )
        return listing, verdict

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def get_listing(self, listing_id: int, user: User | None = None) -> Listing:
        """
        Fetch a listing for display, counting the view.

        Non-approved listings are only visible to their agent and admins;
        anyone else gets NotFoundError. Views by the owner are not counted.
        """
        listing = self._get_alive(listing_id, select_agent=True)
        if not listing.is_visible_to(user):
            raise NotFoundError("Property not found")

        if getattr(user, "user_id", None) != listing.agent_id:
            Listing.objects.filter(listing_id=listing.listing_id).update(
                views=F("views") + 1
            )
            listing.refresh_from_db(fields=["views"])

        return listing

    def list_listings(self, filters: dict[str, Any], user: User | None = None):
        """
        Search listings.

        The public sees Approved listings only. Admins may filter on
        moderation_status; ``mine`` restricts the result to the caller's own
        listings in every status.
        """
        queryset = Listing.objects.alive().select_related("agent")
        authenticated = getattr(user, "is_authenticated", False)
        is_admin = authenticated and user.is_admin()

        if filters.get("mine") and authenticated:
            queryset = queryset.filter(agent_id=user.user_id)
            status = filters.get("moderation_status")
        elif is_admin:
            status = filters.get("moderation_status")
        else:
            queryset = queryset.approved()
            status = None

        if status:
            if status not in ModerationStatus.values():
                raise InvalidRequestError(f"Invalid moderation status: {status}")
            queryset = queryset.filter(moderation_status=status)

        if filters.get("city"):
            queryset = queryset.filter(city__iexact=filters["city"])
        if filters.get("property_type"):
            queryset = queryset.filter(property_type=filters["property_type"])
        if filters.get("listing_status"):
            queryset = queryset.filter(listing_status=filters["listing_status"])

        min_price = _parse_price(filters.get("min_price"), "min_price")
        if min_price is not None:
            queryset = queryset.filter(price__gte=min_price)
        max_price = _parse_price(filters.get("max_price"), "max_price")
        if max_price is not None:
            queryset = queryset.filter(price__lte=max_price)

        return queryset.order_by("-created_at", "-listing_id")

    def check_content(
        self, title: str | None = None, text: str | None = None
    ) -> dict[str, Any]:
        """Run the keyword moderator over free text without saving anything."""
        if not title and not text:
            raise InvalidRequestError("No content provided for filtering")
        return self.moderator.check_content(title=title, text=text)

    # -------------------------------------------------------------------------
    # Admin operations
    # -------------------------------------------------------------------------

    def moderate_listing(
        self, listing_id: int, admin: User, action: str, notes: str | None = None
    ) -> Listing:
        """
        Apply an admin decision: approve, reject or flag.

        The agent is notified of approvals and rejections.
        """
        if not admin.is_admin():
            raise ForbiddenError("Admin access required")

        new_status = MODERATION_ACTIONS.get((action or "").strip().lower())
        if new_status is None:
            raise InvalidRequestError("Invalid action")

        with transaction.atomic():
            try:
                listing = (
                    Listing.objects.alive()
                    .select_for_update()
                    .get(listing_id=listing_id)
                )
            except Listing.DoesNotExist:
                raise NotFoundError("Property not found") from None

            previous_status = listing.moderation_status
            listing.moderation_status = new_status
            if notes:
                listing.moderation_notes = notes
            listing.updated_by = admin.user_id
            listing.save(
                update_fields=[
                    "moderation_status",
                    "moderation_notes",
                    "updated_by",
                    "updated_at",
                ]
            )

        log_moderation_event(
            "listing_moderated",
            listing_id=listing.listing_id,
            user_id=admin.user_id,
            status=new_status,
            previous_status=previous_status,
        )

        if new_status in (
            ModerationStatus.APPROVED.value,
            ModerationStatus.REJECTED.value,
        ):
            self._notify_agent_of_decision(listing, new_status, notes, admin)

        return listing

    def get_moderation_queue(
        self, status: str | None = None, limit: int | None = None
    ):
        """
        Listings awaiting review: most reported first, then oldest first.

        Defaults to Pending and Flagged listings.
        """
        if status and status not in ModerationStatus.values():
            raise InvalidRequestError(f"Invalid moderation status: {status}")

        if limit is None:
            limit = settings.MODERATION_QUEUE_LIMIT
        if limit < 1:
            raise InvalidRequestError("limit must be a positive integer")

        if status:
            queryset = Listing.objects.alive().filter(moderation_status=status)
        else:
            queryset = Listing.objects.awaiting_review()
        return list(
            queryset.select_related("agent")
            .order_by("-report_count", "created_at", "listing_id")[:limit]
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _get_alive(listing_id: int, select_agent: bool = False) -> Listing:
        queryset = Listing.objects.alive()
        if select_agent:
            queryset = queryset.select_related("agent")
        try:
            return queryset.get(listing_id=listing_id)
        except Listing.DoesNotExist:
            raise NotFoundError("Property not found") from None

    @staticmethod
    def _validate(listing: Listing) -> None:
        try:
            listing.full_clean(exclude=["agent"])
        except ValidationError as e:
            raise InvalidRequestError(_validation_message(e)) from e

    def _notify_agent_of_decision(
        self, listing: Listing, status: str, notes: str | None, admin: User
    ) -> None:
        if status == ModerationStatus.APPROVED.value:
            message = (
                f'Your property "{listing.title}" has been approved '
                "and is now visible on the platform."
            )
            notification_type = NotificationType.SUCCESS.value
        else:
            message = (
                f'Your property "{listing.title}" has been rejected. '
                "Please review the notes for more information: "
                f"{notes or 'No notes provided.'}"
            )
            notification_type = NotificationType.ERROR.value

        notify_best_effort(
            self.notifier.create_notification,
            user=listing.agent,
            title=f"Property {status}",
            message=message,
            notification_type=notification_type,
            related_type=RelatedObjectType.PROPERTY.value,
            related_id=listing.listing_id,
            created_by=admin.user_id,
        )
