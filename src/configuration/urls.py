"""
URL configuration for the PropertyHub backend.

API routes live under /api/core/ (listings, reports, appeals, notifications,
content filter) and /api/admin/ (moderation). Interactive documentation is
served by drf-yasg at /swagger/ and /redoc/.
"""

from django.contrib import admin
from django.urls import include, path, re_path
from django.views.generic import RedirectView
from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework import permissions

api_urlpatterns = [
    path("api/admin/", include("propertyhub.apis.admin.urls")),
    path("api/core/", include("propertyhub.apis.core.urls")),
]

schema_view = get_schema_view(
    openapi.Info(
        title="PropertyHub API",
        default_version="v1",
        description="Listings, moderation, reports, appeals and notifications.",
        contact=openapi.Contact(email="support@propertyhub.local"),
    ),
    public=True,
    permission_classes=(permissions.AllowAny,),
    patterns=api_urlpatterns,
)

urlpatterns = [
    *api_urlpatterns,
    path("django-admin/", admin.site.urls),
    re_path(
        r"^swagger(?P<format>\.json|\.yaml)$",
        schema_view.without_ui(cache_timeout=0),
        name="schema-json",
    ),
    path(
        "swagger/",
        schema_view.with_ui("swagger", cache_timeout=0),
        name="schema-swagger-ui",
    ),
    path("redoc/", schema_view.with_ui("redoc", cache_timeout=0), name="schema-redoc"),
    path("", RedirectView.as_view(url="/swagger/", permanent=False)),
]
