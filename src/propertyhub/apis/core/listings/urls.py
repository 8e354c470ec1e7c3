from django.urls import path

from .apis import (
    CreateListingAPI,
    GetListingAPI,
    ListListingsAPI,
    ReportListingAPI,
    UpdateListingAPI,
)

urlpatterns = [
    path("", ListListingsAPI.as_view(), name="list_listings"),
    path("create/", CreateListingAPI.as_view(), name="create_listing"),
    path("<int:listing_id>/", GetListingAPI.as_view(), name="get_listing"),
    path(
        "<int:listing_id>/update/", UpdateListingAPI.as_view(), name="update_listing"
    ),
    path(
        "<int:listing_id>/report/", ReportListingAPI.as_view(), name="report_listing"
    ),
]
