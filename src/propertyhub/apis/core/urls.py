from django.urls import include, path

urlpatterns = [
    path("listings/", include("propertyhub.apis.core.listings.urls")),
    path("content-filter/", include("propertyhub.apis.core.content_filter.urls")),
    path("appeals/", include("propertyhub.apis.core.appeals.urls")),
    path("notifications/", include("propertyhub.apis.core.notifications.urls")),
]
