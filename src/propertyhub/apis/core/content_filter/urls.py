from django.urls import path

from .apis import ContentFilterAPI

urlpatterns = [
    path("", ContentFilterAPI.as_view(), name="content_filter"),
]
