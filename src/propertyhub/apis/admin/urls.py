from django.urls import path

from propertyhub.apis.admin.moderation_api import (
    ListingReportsAPI,
    ModerateListingAPI,
    ModerationQueueAPI,
    ResolveAppealAPI,
)

urlpatterns = [
    # Moderation
    path("moderation/queue/", ModerationQueueAPI.as_view(), name="moderation_queue"),
    path(
        "moderation/listings/<int:listing_id>/",
        ModerateListingAPI.as_view(),
        name="moderate_listing",
    ),
    path(
        "moderation/listings/<int:listing_id>/reports/",
        ListingReportsAPI.as_view(),
        name="listing_reports",
    ),
    # Appeals
    path("appeals/<int:appeal_id>/", ResolveAppealAPI.as_view(), name="resolve_appeal"),
]
