from rest_framework import serializers

from propertyhub.models import (
    AppealStatus,
    Listing,
    ListingAppeal,
    ListingReport,
    ListingStatus,
    PropertyType,
)
from propertyhub.serializers.core_serializers import UserSummarySerializer

MODERATION_FIELDS = (
    "moderation_status",
    "moderation_notes",
    "report_count",
    "views",
)


class ListingSerializer(serializers.ModelSerializer):
    """Read representation of a listing, including its moderation state."""

    agent = UserSummarySerializer(read_only=True)

    class Meta:
        model = Listing
        fields = [
            "listing_id",
            "agent",
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
            *MODERATION_FIELDS,
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ListingWriteSerializer(serializers.ModelSerializer):
    """
    Input for creating and editing listings.

    Moderation state, counters and the owning agent are not accepted; the
    service sets them.
    """

    property_type = serializers.ChoiceField(choices=PropertyType.choices())
    listing_status = serializers.ChoiceField(
        choices=ListingStatus.choices(), required=False
    )
    features = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False
    )

    class Meta:
        model = Listing
        fields = [
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
        ]

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError("Title cannot be empty.")
        return value.strip()

    def validate_description(self, value):
        if not value.strip():
            raise serializers.ValidationError("Description cannot be empty.")
        return value


class ListingReportSerializer(serializers.ModelSerializer):
    reporter = UserSummarySerializer(read_only=True)

    class Meta:
        model = ListingReport
        fields = ["report_id", "listing", "reporter", "reason", "reported_at"]
        read_only_fields = fields


class ReportRequestSerializer(serializers.Serializer):
    # Blank reasons are rejected by ReportService
    reason = serializers.CharField(allow_blank=True, required=False, default="")


class ListingAppealSerializer(serializers.ModelSerializer):
    agent = UserSummarySerializer(read_only=True)
    reviewed_by = UserSummarySerializer(read_only=True)
    listing_title = serializers.CharField(source="listing.title", read_only=True)

    class Meta:
        model = ListingAppeal
        fields = [
            "appeal_id",
            "listing",
            "listing_title",
            "agent",
            "reason",
            "status",
            "admin_notes",
            "reviewed_by",
            "reviewed_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class AppealRequestSerializer(serializers.Serializer):
    listing_id = serializers.IntegerField()
    reason = serializers.CharField(allow_blank=True)


class AppealResolutionSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=AppealStatus.resolutions())
    admin_notes = serializers.CharField(allow_blank=True, required=False, default="")


class ModerationDecisionSerializer(serializers.Serializer):
    action = serializers.ChoiceField(choices=["approve", "reject", "flag"])
    notes = serializers.CharField(allow_blank=True, required=False, default="")


class ContentFilterSerializer(serializers.Serializer):
    title = serializers.CharField(allow_blank=True, required=False, default="")
    text = serializers.CharField(allow_blank=True, required=False, default="")
