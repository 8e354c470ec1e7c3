from django.urls import path

from .apis import AppealsAPI

urlpatterns = [
    path("", AppealsAPI.as_view(), name="appeals"),
]
