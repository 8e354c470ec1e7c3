from django.urls import path

from .apis import (
    ListNotificationsAPI,
    MarkAllNotificationsAsReadAPI,
    MarkNotificationAsReadAPI,
)

urlpatterns = [
    path("list/", ListNotificationsAPI.as_view(), name="list_notifications"),
    path(
        "<int:notification_id>/mark-as-read/",
        MarkNotificationAsReadAPI.as_view(),
        name="mark_notification_as_read",
    ),
    path(
        "mark-all-read/",
        MarkAllNotificationsAsReadAPI.as_view(),
        name="mark_all_notifications_as_read",
    ),
]
