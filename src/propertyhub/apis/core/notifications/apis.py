from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from propertyhub.apis.common import error_response, query_flag
from propertyhub.permissions import IsAuthenticatedUser
from propertyhub.serializers.core_serializers import NotificationSerializer
from propertyhub.services.notification import NotificationService


class ListNotificationsAPI(APIView):
    """List the authenticated user's notifications."""

    permission_classes = [IsAuthenticatedUser]

    @swagger_auto_schema(
        operation_description="List notifications, newest first.",
        manual_parameters=[
            openapi.Parameter(
                "unread",
                openapi.IN_QUERY,
                type=openapi.TYPE_BOOLEAN,
                description="Only return unread notifications",
                required=False,
            ),
        ],
        responses={200: NotificationSerializer(many=True)},
    )
    def get(self, request):
        notifications = NotificationService.list_notifications(
            request.user_id, unread_only=query_flag(request, "unread")
        )
        serializer = NotificationSerializer(notifications, many=True)
        return Response(
            {
                "message": "Notifications retrieved successfully",
                "count": len(serializer.data),
                "unread_count": sum(
                    1 for item in serializer.data if not item["is_read"]
                ),
                "data": serializer.data,
            },
            status=status.HTTP_200_OK,
        )


class MarkNotificationAsReadAPI(APIView):
    """Mark a specific notification as read for the authenticated user."""

    permission_classes = [IsAuthenticatedUser]

    @swagger_auto_schema(
        operation_description="Mark a specific notification as read.",
        responses={
            200: NotificationSerializer,
            404: error_response("Notification not found."),
        },
    )
    def put(self, request, notification_id):
        notification = NotificationService.mark_as_read(
            notification_id, request.user_id
        )
        return Response(
            {
                "message": "Notification marked as read successfully.",
                "data": NotificationSerializer(notification).data,
            },
            status=status.HTTP_200_OK,
        )


class MarkAllNotificationsAsReadAPI(APIView):
    """Mark every unread notification of the authenticated user as read."""

    permission_classes = [IsAuthenticatedUser]

    @swagger_auto_schema(
        operation_description="Mark all notifications as read.",
        responses={
            200: openapi.Response(
                description="All notifications marked as read.",
                schema=openapi.Schema(
                    type=openapi.TYPE_OBJECT,
                    properties={
                        "message": openapi.Schema(type=openapi.TYPE_STRING),
                        "count": openapi.Schema(type=openapi.TYPE_INTEGER),
                    },
                ),
            ),
        },
    )
    def put(self, request):
        count = NotificationService.mark_all_as_read(request.user_id)
        return Response(
            {"message": "All notifications marked as read.", "count": count},
            status=status.HTTP_200_OK,
        )
